from dataclasses import dataclass, field
from typing import Optional

from pulumi import Output

from infra_kubets.lib.iam import EKS_CLUSTER_POLICY, EKS_SERVICE_POLICY, EKS_SERVICE_PRINCIPAL


@dataclass
class SubnetArgs:
    name: str
    """Resource name, also used for the `Name` tag (main-public-a)"""

    availability_zone: str
    """Where should this subnet be placed?"""

    cidr_block: str
    """Subnet CIDR block (10.0.1.0/24)"""


def _default_public_subnets() -> list[SubnetArgs]:
    return [
        SubnetArgs(name="main-public-a", availability_zone="ap-northeast-1a", cidr_block="10.0.1.0/24"),
        SubnetArgs(name="main-public-d", availability_zone="ap-northeast-1d", cidr_block="10.0.2.0/24"),
    ]


def _default_private_subnets() -> list[SubnetArgs]:
    return [
        SubnetArgs(name="main-private-a", availability_zone="ap-northeast-1a", cidr_block="10.0.100.0/24"),
    ]


@dataclass
class EKSClusterArgs:
    cluster_name: str = "kubets-cluster"
    """EKS cluster name"""

    version: Optional[str] = None
    """Kubernetes version, latest supported by EKS if unset"""

    role_name: str = "eks-cluster-role"
    """Name of the IAM role assumed by the EKS control plane"""

    service_principal: str = EKS_SERVICE_PRINCIPAL
    """Service allowed to assume the control plane role"""

    managed_policies: list[str] = field(default_factory=lambda: [EKS_CLUSTER_POLICY, EKS_SERVICE_POLICY])
    """Managed policies attached to the control plane role, in order. Policy names or full ARNs."""

    vpc_cidr: str = "10.0.0.0/16"
    """The primary CIDR of the VPC"""

    public_subnets: list[SubnetArgs] = field(default_factory=_default_public_subnets)
    """Subnets that receive public IP addresses on launch"""

    private_subnets: list[SubnetArgs] = field(default_factory=_default_private_subnets)
    """Subnets without public IP addresses on launch"""

    create_bucket: bool = True
    """Create the cluster's S3 bucket"""

    bucket_name: str = "my-bucket"
    """Bucket name without the sysenv prefix"""


@dataclass
class EKSClusterExports:
    cluster_name: Output[str]
    cluster_arn: Output[str]
    cluster_endpoint: Output[str]
    role_name: str
    role_arn: Output[str]
    policy_arns: list[str]
    vpc_id: Output[str]
    route_table: Output[str]
    public_subnets: list[Output[str]]
    private_subnets: list[Output[str]]
    bucket: Optional[Output[str]] = None
