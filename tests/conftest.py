import pulumi

ACCOUNT_ID = "123456789012"


class KubetsMocks(pulumi.runtime.Mocks):
    """Echo inputs back as outputs, filling in the identifiers AWS would compute"""

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        outputs = dict(args.inputs)

        if args.typ == "aws:iam/role:Role":
            outputs["arn"] = f"arn:aws:iam::{ACCOUNT_ID}:role/{args.inputs['name']}"
            return [args.inputs["name"], outputs]

        if args.typ == "aws:eks/cluster:Cluster":
            outputs["arn"] = f"arn:aws:eks:ap-northeast-1:{ACCOUNT_ID}:cluster/{args.inputs['name']}"
            outputs["endpoint"] = f"https://{args.inputs['name']}.eks.amazonaws.com"
            return [args.inputs["name"], outputs]

        if args.typ == "aws:s3/bucket:Bucket":
            return [args.inputs["bucket"], outputs]

        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        if args.token == "aws:index/getPartition:getPartition":
            return {"id": "aws", "partition": "aws", "dnsSuffix": "amazonaws.com", "reverseDnsPrefix": "com.amazonaws"}

        return {}


pulumi.runtime.set_mocks(KubetsMocks(), preview=False)
