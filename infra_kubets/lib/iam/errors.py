from .types import ProvisioningStep


class RoleProvisioningError(Exception):
    """Base class for failures while provisioning a role"""


class SerializationError(RoleProvisioningError):
    """
    The trust policy could not be encoded into an IAM policy document.

    Raised before any resource is requested.
    """


class ProvisioningError(RoleProvisioningError):
    """
    A role or policy attachment request failed.

    Carries the step that failed and the underlying cause. Nothing requested before the failing step is cleaned up;
    the engine reconciles partially-created resources on the next run.
    """

    def __init__(self, step: ProvisioningStep, cause: Exception):
        super().__init__(f"{step} failed: {cause}")
        self.step = step
        self.cause = cause
