from pulumi import ComponentResource

from infra_kubets.lib.iam import PulumiSession, RoleHandle, provision_role, resolve_policy_arn
from infra_kubets.lib.tags import get_tags
from .config import EKSClusterArgs


def create_cluster_role(cls, parent: ComponentResource, config: EKSClusterArgs) -> RoleHandle:
    """
    Create the role assumed by the EKS control plane, with its managed policies attached in order.

    A failed step raises the ``SerializationError`` or ``ProvisioningError`` describing it, which aborts the program.

    :param cls: Calling class object, used for the partition
    :param parent: Component the role is created under
    :param config: Cluster configuration
    :return: Handle to the role
    """
    session = PulumiSession(
        parent=parent,
        description=f"EKS control plane role for [{config.cluster_name}]",
        tags=get_tags("iam", config.role_name),
    )

    return provision_role(
        session,
        config.role_name,
        config.service_principal,
        [resolve_policy_arn(policy, cls.partition) for policy in config.managed_policies],
    ).unwrap()
