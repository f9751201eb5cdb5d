import json
from collections.abc import Mapping

from .errors import SerializationError
from .types import ASSUME_ROLE, TRUST_POLICY_ACTIONS, Effect, Statement, TrustPolicyDocument


def build_service_trust_policy(service_principal: str, action: str = ASSUME_ROLE) -> TrustPolicyDocument:
    """
    Build a trust policy allowing an AWS service to assume a role

    Example::

        build_service_trust_policy("eks.amazonaws.com")

    serializes to::

        {
            "Version": "2012-10-17",
            "Statement": [
                {"Effect": "Allow", "Principal": {"Service": "eks.amazonaws.com"}, "Action": "sts:AssumeRole"}
            ]
        }

    :param service_principal: Service identifier, embedded verbatim
    :param action: Trust action to grant
    :return: A single-statement trust policy
    """
    return TrustPolicyDocument(
        statements=(
            Statement(
                effect=Effect.ALLOW,
                principal={"Service": service_principal},
                action=action,
            ),
        )
    )


def trust_policy_to_dict(document: TrustPolicyDocument) -> dict:
    """
    Convert a trust policy into the IAM document structure, checking it along the way

    :param document: Trust policy
    :return: IAM policy document as a dict
    :raises SerializationError: if the document is malformed
    """
    if not document.version:
        raise SerializationError("trust policy has no version")
    if not document.statements:
        raise SerializationError("trust policy needs at least one statement")

    return {
        "Version": document.version,
        "Statement": [_statement_to_dict(i, statement) for i, statement in enumerate(document.statements)],
    }


def _statement_to_dict(index: int, statement: Statement) -> dict:
    if not isinstance(statement.effect, Effect):
        raise SerializationError(f"statement {index} has unknown effect {statement.effect!r}")
    if statement.action not in TRUST_POLICY_ACTIONS:
        raise SerializationError(f"statement {index} has action {statement.action!r}, not valid in a trust policy")
    if not isinstance(statement.principal, Mapping) or not statement.principal:
        raise SerializationError(f"statement {index} has no principal")
    if not all(statement.principal.values()):
        raise SerializationError(f"statement {index} has an empty principal identifier")

    return {
        "Effect": statement.effect.value,
        "Principal": dict(statement.principal),
        "Action": statement.action,
    }


def serialize_trust_policy(document: TrustPolicyDocument) -> str:
    """
    Serialize a trust policy into the JSON document IAM expects

    :param document: Trust policy
    :return: JSON policy document
    :raises SerializationError: if the document is malformed or holds values that can't be encoded
    """
    policy = trust_policy_to_dict(document)

    try:
        return json.dumps(policy)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"trust policy could not be encoded: {e}") from e
