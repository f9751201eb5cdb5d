from typing import Optional

from pulumi import ResourceOptions, ComponentResource
from pulumi_aws import eks

from infra_kubets.lib.iam import RoleHandle
from infra_kubets.lib.tags import get_tags
from .types import Network


def cluster_options(parent: ComponentResource, role: RoleHandle) -> ResourceOptions:
    """The cluster waits for the role's policy attachments, EKS refuses a role that can't manage the cluster yet."""
    return ResourceOptions(
        parent=parent,
        depends_on=[attachment.resource for attachment in role.attachments],
    )


def create_cluster(
    parent: ComponentResource,
    name: str,
    role: RoleHandle,
    network: Network,
    version: Optional[str] = None,
) -> eks.Cluster:
    """
    Create the EKS control plane in every subnet of the network

    :param parent: Component to create the cluster under
    :param name: Cluster name
    :param role: Control plane role
    :param network: Network holding the subnets
    :param version: Kubernetes version
    :return: Cluster
    """
    return eks.Cluster(
        name,
        name=name,
        role_arn=role.arn,
        version=version,
        vpc_config=eks.ClusterVpcConfigArgs(
            subnet_ids=[subnet.id for subnet in network.subnets],
        ),
        tags=get_tags("eks", "cluster", name),
        opts=cluster_options(parent, role),
    )
