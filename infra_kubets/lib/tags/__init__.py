from pulumi import get_stack, get_project

from ..config import (
    get_tag_prefix,
    get_team,
    get_sysenv,
    get_purpose,
    get_phase,
)


def get_tags(service, role, group=None) -> dict:
    """
    Generate tag dict for resources

    example tags:
      eks control plane role:
        Name = iam-eks-cluster-role
               service-role
        kubets:sysenv = kt-aws-ap-northeast-1-sandbox-dev
        kubets:service = iam
        kubets:role = eks-cluster-role
        kubets:group = main
        kubets:createdby = pulumi
        kubets:team = infrastructure
        kubets:project = kubets
        kubets:stack = eks-cluster
        kubets:purpose = sandbox
        kubets:phase = dev

      main-public-a subnet:
        Name = subnet-public-ap-northeast-1a
               service-role-group
        kubets:sysenv = kt-aws-ap-northeast-1-sandbox-dev
        kubets:service = subnet
        kubets:role = public
        kubets:group = ap-northeast-1a
        kubets:createdby = pulumi
        kubets:team = infrastructure
        kubets:project = kubets
        kubets:stack = eks-cluster
        kubets:purpose = sandbox
        kubets:phase = dev

    :param service: This resource's "namespace" (iam, subnet, eks,...)
    :param role: The role this resource performs within the namespace (public, private, cluster,...)
    :param group: The group this resource belongs to (ap-northeast-1a). Leave unset to use "main".
    :return: Dict of tags
    """

    group_name = "main" if not group else group
    group_suffix = f"-{group}" if group else ""
    tag_prefix = get_tag_prefix()

    return {
        "Name": f"{service}-{role}{group_suffix}",
        f"{tag_prefix}sysenv": get_sysenv(),
        f"{tag_prefix}service": service,
        f"{tag_prefix}role": role,
        f"{tag_prefix}group": group_name,
        f"{tag_prefix}team": get_team(),
        f"{tag_prefix}createdby": "pulumi",
        f"{tag_prefix}stack": get_stack(),
        f"{tag_prefix}project": get_project(),
        f"{tag_prefix}purpose": get_purpose(),
        f"{tag_prefix}phase": get_phase(),
    }
