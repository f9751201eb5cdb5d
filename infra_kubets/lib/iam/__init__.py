from .errors import RoleProvisioningError, SerializationError, ProvisioningError
from .managed_policies import (
    EKS_CLUSTER_POLICY,
    EKS_SERVICE_POLICY,
    EKS_SERVICE_PRINCIPAL,
    managed_policy_arn,
    eks_cluster_policy_arns,
    resolve_policy_arn,
)
from .result import Ok, Err, Result
from .role_provisioner import provision_role
from .session import ProvisioningSession, PulumiSession, attachment_resource_name
from .trust_policy import build_service_trust_policy, serialize_trust_policy, trust_policy_to_dict
from .types import (
    ASSUME_ROLE,
    POLICY_VERSION,
    Effect,
    Statement,
    TrustPolicyDocument,
    ProvisioningStep,
    StepKind,
    RoleHandle,
    AttachmentHandle,
)
