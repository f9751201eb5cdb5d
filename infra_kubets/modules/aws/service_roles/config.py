from dataclasses import dataclass, field
from typing import Optional

from pulumi import Output


@dataclass
class ServiceRole:
    name: str
    """IAM role name"""

    service_principal: str
    """AWS service allowed to assume this role (ec2.amazonaws.com)"""

    managed_policies: list[str] = field(default_factory=list)
    """Managed policies to attach, in order. Policy names or full ARNs."""

    description: Optional[str] = None
    """Optional description of this role"""


@dataclass
class ServiceRolesConfig:
    roles: list[ServiceRole]

    path: str = "/"
    """IAM path for every role"""


@dataclass
class ServiceRoleExports:
    name: str
    arn: Output[str]
    policy_arns: list[str]


@dataclass
class ServiceRolesExports:
    path: str
    roles: list[ServiceRoleExports]
