from abc import ABC, abstractmethod
from typing import Optional

from pulumi import Resource, ResourceOptions
from pulumi_aws import iam

from infra_kubets.lib.utils import kebab_from_camel
from .types import AttachmentHandle, RoleHandle


class ProvisioningSession(ABC):
    """
    Handle to the active provisioning run.

    Provisioning functions take a session instead of reaching for global state. Every method expresses an "ensure"
    intent: the engine behind the session decides whether anything actually has to change.
    """

    @abstractmethod
    def ensure_role(self, role_name: str, trust_policy: str) -> RoleHandle:
        """
        Ensure a role with the given trust policy exists

        :param role_name: Role name, unique within the account
        :param trust_policy: Serialized trust policy document
        :return: Handle to the role
        """

    @abstractmethod
    def ensure_policy_attachment(self, role: RoleHandle, policy_arn: str) -> AttachmentHandle:
        """
        Ensure a managed policy is attached to a role

        :param role: Role returned by ``ensure_role``
        :param policy_arn: Managed policy ARN
        :return: Handle to the attachment
        """


def attachment_resource_name(role_name: str, policy_arn: str) -> str:
    """
    Resource name for a policy attachment, unique per role and policy ARN

    AWS managed policies are named after the policy alone:
    ``("eks-cluster-role", "arn:aws:iam::aws:policy/AmazonEKSClusterPolicy")`` becomes
    ``eks-cluster-role-amazon-eks-cluster-policy``.

    Customer managed policies also carry the account and the policy path:
    ``("eks-cluster-role", "arn:aws:iam::123456789012:policy/team/AmazonEKSClusterPolicy")`` becomes
    ``eks-cluster-role-123456789012-team-amazon-eks-cluster-policy``.
    """
    parts = policy_arn.split(":", 5)
    if len(parts) < 6:
        return f"{role_name}-{kebab_from_camel(policy_arn.rsplit('/', 1)[-1])}"

    account = parts[4]
    segments = [kebab_from_camel(segment) for segment in parts[5].split("/")[1:] if segment]

    if account == "aws":
        return f"{role_name}-{segments[-1]}"

    return "-".join([role_name, account, *segments])


class PulumiSession(ProvisioningSession):
    """
    Session backed by the Pulumi engine. Roles and attachments become ``pulumi_aws.iam`` resources registered in the
    current program; Pulumi diffs them against the stack state.
    """

    def __init__(
        self,
        parent: Optional[Resource] = None,
        *,
        path: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[dict] = None,
    ):
        """
        :param parent: Component the roles are created under
        :param path: IAM path for created roles
        :param description: Description for created roles
        :param tags: Tags for created roles
        """
        self.parent = parent
        self.path = path
        self.description = description
        self.tags = tags

    def ensure_role(self, role_name: str, trust_policy: str) -> RoleHandle:
        role = iam.Role(
            role_name,
            name=role_name,
            assume_role_policy=trust_policy,
            description=self.description or f"Kubets-generated role [{role_name}]",
            path=self.path,
            tags=self.tags,
            opts=ResourceOptions(parent=self.parent),
        )

        return RoleHandle(name=role_name, arn=role.arn, id=role.id, resource=role)

    def ensure_policy_attachment(self, role: RoleHandle, policy_arn: str) -> AttachmentHandle:
        attachment = iam.RolePolicyAttachment(
            attachment_resource_name(role.name, policy_arn),
            role=role.id,
            policy_arn=policy_arn,
            opts=ResourceOptions(parent=role.resource),
        )

        return AttachmentHandle(policy_arn=policy_arn, resource=attachment)
