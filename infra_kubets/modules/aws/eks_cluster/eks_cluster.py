from pulumi import log

from infra_kubets.lib.aws.base import AWSModule
from .bucket import create_bucket
from .cluster import create_cluster
from .config import EKSClusterArgs, EKSClusterExports, SubnetArgs
from .iam import create_cluster_role
from .network import setup_network


class EKSCluster(AWSModule):
    def build(self, config: EKSClusterArgs) -> EKSClusterExports:
        _validate_subnets(config.public_subnets + config.private_subnets)

        # Control plane role first, the cluster needs its ARN
        role = create_cluster_role(self, self, config)

        network = setup_network(self, config.vpc_cidr, config.public_subnets, config.private_subnets)

        cluster = create_cluster(self, config.cluster_name, role, network, config.version)

        bucket = create_bucket(self, config.bucket_name) if config.create_bucket else None

        log.info(f"declared EKS cluster `{config.cluster_name}` with role `{role.name}`", resource=self)

        return EKSClusterExports(
            cluster_name=cluster.name,
            cluster_arn=cluster.arn,
            cluster_endpoint=cluster.endpoint,
            role_name=role.name,
            role_arn=role.arn,
            policy_arns=[attachment.policy_arn for attachment in role.attachments],
            vpc_id=network.vpc.id,
            route_table=network.route_table.id,
            public_subnets=[subnet.id for subnet in network.public_subnets],
            private_subnets=[subnet.id for subnet in network.private_subnets],
            bucket=bucket.bucket if bucket else None,
        )


def _validate_subnets(subnets: list[SubnetArgs]) -> None:
    """
    EKS needs subnets in at least two availability zones

    :param subnets: All subnets of the cluster
    :raises ValueError: if the subnets can't host a cluster
    """
    if not subnets:
        raise ValueError("No public or private subnets specified. Please add some.")

    names = [subnet.name for subnet in subnets]
    if len(set(names)) != len(names):
        raise ValueError(f"Subnet names must be unique, got {names}")

    if len({subnet.availability_zone for subnet in subnets}) < 2:
        raise ValueError("EKS requires subnets in at least two availability zones")
