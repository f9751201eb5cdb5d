import pytest

from infra_kubets.lib.iam import AttachmentHandle, ProvisioningSession, RoleHandle

ACCOUNT_ID = "123456789012"


class RecordingSession(ProvisioningSession):
    """Records every intent in order, optionally failing the role or the n-th attachment"""

    def __init__(self, role_error: Exception = None, attachment_errors: dict[int, Exception] = None):
        self.intents = []
        self.role_error = role_error
        self.attachment_errors = attachment_errors or {}

    @property
    def attachment_intents(self) -> list[tuple]:
        return [intent for intent in self.intents if intent[0] == "attachment"]

    def ensure_role(self, role_name, trust_policy):
        self.intents.append(("role", role_name, trust_policy))

        if self.role_error:
            raise self.role_error

        return RoleHandle(name=role_name, arn=f"arn:aws:iam::{ACCOUNT_ID}:role/{role_name}", id=role_name)

    def ensure_policy_attachment(self, role, policy_arn):
        index = len(self.attachment_intents)
        self.intents.append(("attachment", role.arn, policy_arn))

        if index in self.attachment_errors:
            raise self.attachment_errors[index]

        return AttachmentHandle(policy_arn=policy_arn)


class FakeAccount:
    """Remembers what exists, like an engine's state, and counts the changes it had to make"""

    def __init__(self):
        self.roles = {}
        self.attachments = set()
        self.mutations = []


class EnsureSession(ProvisioningSession):
    """Ensure semantics against a FakeAccount: only missing or different resources are changed"""

    def __init__(self, account: FakeAccount):
        self.account = account

    def ensure_role(self, role_name, trust_policy):
        if self.account.roles.get(role_name) != trust_policy:
            self.account.mutations.append(("put-role", role_name))
            self.account.roles[role_name] = trust_policy

        return RoleHandle(name=role_name, arn=f"arn:aws:iam::{ACCOUNT_ID}:role/{role_name}", id=role_name)

    def ensure_policy_attachment(self, role, policy_arn):
        key = (role.name, policy_arn)
        if key not in self.account.attachments:
            self.account.mutations.append(("attach", role.name, policy_arn))
            self.account.attachments.add(key)

        return AttachmentHandle(policy_arn=policy_arn)


@pytest.fixture
def session():
    return RecordingSession()


@pytest.fixture
def make_session():
    return RecordingSession


@pytest.fixture
def account():
    return FakeAccount()


@pytest.fixture
def make_ensure_session():
    return EnsureSession
