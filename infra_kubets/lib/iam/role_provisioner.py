from functools import partial
from typing import Iterable

from pulumi import log

from .errors import ProvisioningError, SerializationError
from .result import Err, Ok, Result
from .session import ProvisioningSession
from .trust_policy import build_service_trust_policy, serialize_trust_policy
from .types import ProvisioningStep, RoleHandle, StepKind


def provision_role(
    session: ProvisioningSession,
    role_name: str,
    service_principal: str,
    managed_policy_arns: Iterable[str],
) -> Result[RoleHandle]:
    """
    Create a role that ``service_principal`` may assume, then attach managed policies to it in order

    Steps run strictly one after another: build the trust policy, request the role, then request one attachment per
    policy. The first failure ends the run, nothing after it is requested and nothing before it is undone. A policy
    listed twice is rejected before the role is requested.

    Example::

        result = provision_role(
            PulumiSession(parent=self),
            "eks-cluster-role",
            "eks.amazonaws.com",
            eks_cluster_policy_arns(),
        )
        role = result.unwrap()

    :param session: Active provisioning session
    :param role_name: Role name, unique within the account (uniqueness is checked by the engine)
    :param service_principal: Service allowed to assume the role, embedded verbatim in the trust policy
    :param managed_policy_arns: Managed policies to attach, in order
    :return: ``Ok(RoleHandle)``, or ``Err`` carrying a ``SerializationError`` or ``ProvisioningError``
    """
    policy_arns = list(managed_policy_arns)

    result = (
        _build_trust_policy(service_principal)
        .and_then(partial(_check_policy_arns, policy_arns))
        .and_then(partial(_request_role, session, role_name))
    )

    for index, policy_arn in enumerate(policy_arns):
        result = result.and_then(partial(_request_attachment, session, index, policy_arn))

    return result


def _build_trust_policy(service_principal: str) -> Result[str]:
    try:
        trust_policy = serialize_trust_policy(build_service_trust_policy(service_principal))
    except SerializationError as e:
        log.error(f"unable to build trust policy for `{service_principal}`: {e}")
        return Err(e)

    log.debug(f"built trust policy {trust_policy}")
    return Ok(trust_policy)


def _check_policy_arns(policy_arns: list[str], trust_policy: str) -> Result[str]:
    """A policy is attached to a role at most once"""
    seen = set()

    for index, policy_arn in enumerate(policy_arns):
        if policy_arn in seen:
            step = ProvisioningStep(StepKind.ATTACHMENT, policy_arn, index)
            log.error(f"{step} repeats an earlier policy")
            return Err(ProvisioningError(step, ValueError(f"policy `{policy_arn}` is listed more than once")))

        seen.add(policy_arn)

    return Ok(trust_policy)


def _request_role(session: ProvisioningSession, role_name: str, trust_policy: str) -> Result[RoleHandle]:
    step = ProvisioningStep(StepKind.ROLE, role_name)

    if not role_name:
        return Err(ProvisioningError(step, ValueError("role name must not be empty")))

    try:
        role = session.ensure_role(role_name, trust_policy)
    except Exception as e:
        log.error(f"{step} failed: {e}")
        return Err(ProvisioningError(step, e))

    log.debug(f"requested role `{role_name}`")
    return Ok(role)


def _request_attachment(
    session: ProvisioningSession, index: int, policy_arn: str, role: RoleHandle
) -> Result[RoleHandle]:
    step = ProvisioningStep(StepKind.ATTACHMENT, policy_arn, index)

    try:
        attachment = session.ensure_policy_attachment(role, policy_arn)
    except Exception as e:
        log.error(f"{step} for role `{role.name}` failed: {e}")
        return Err(ProvisioningError(step, e))

    role.attachments.append(attachment)

    log.debug(f"requested attachment of `{policy_arn}` to role `{role.name}`")
    return Ok(role)
