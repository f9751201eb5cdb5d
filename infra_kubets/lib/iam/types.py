from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pulumi import Input

POLICY_VERSION = "2012-10-17"
"""IAM policy language revision"""

ASSUME_ROLE = "sts:AssumeRole"

TRUST_POLICY_ACTIONS = frozenset(
    {
        ASSUME_ROLE,
        "sts:AssumeRoleWithSAML",
        "sts:AssumeRoleWithWebIdentity",
        "sts:SetSourceIdentity",
        "sts:TagSession",
    }
)
"""Actions IAM accepts in a role trust policy"""


class Effect(str, Enum):
    ALLOW = "Allow"
    DENY = "Deny"


@dataclass(frozen=True)
class Statement:
    effect: Effect
    """Whether the statement grants or denies ``action``"""

    principal: dict[str, Any]
    """Who the statement applies to, e.g. ``{"Service": "eks.amazonaws.com"}``"""

    action: str
    """Permitted operation, e.g. ``sts:AssumeRole``"""


@dataclass(frozen=True)
class TrustPolicyDocument:
    statements: tuple[Statement, ...]
    """Ordered statements, at least one"""

    version: str = POLICY_VERSION
    """IAM policy language revision"""


class StepKind(Enum):
    ROLE = "role"
    ATTACHMENT = "attachment"


@dataclass(frozen=True)
class ProvisioningStep:
    kind: StepKind

    target: str
    """Role name for the role step, policy ARN for an attachment step"""

    index: Optional[int] = None
    """Position of the attachment in the requested policy list"""

    def __str__(self) -> str:
        if self.kind is StepKind.ATTACHMENT:
            return f"attachment[{self.index}] of `{self.target}`"
        return f"creation of role `{self.target}`"


@dataclass
class AttachmentHandle:
    policy_arn: str
    """Managed policy bound to the role"""

    resource: Any = None
    """Engine resource backing this attachment"""


@dataclass
class RoleHandle:
    name: str
    """Role name as requested"""

    arn: Input[str]
    """Globally unique role identifier"""

    id: Input[str] = None
    """Engine identifier used to reference the role from dependent resources"""

    resource: Any = None
    """Engine resource backing this role"""

    attachments: list[AttachmentHandle] = field(default_factory=list)
    """Attachments issued for this role, in order"""
