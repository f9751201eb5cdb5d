import logging
import os

from pulumi import get_stack, log, export

from infra_kubets.lib.config import get_provider_override
from infra_kubets.lib.utils import outputs_from_exports
from infra_kubets.module_manager import get_module_manager


def run_stack(provider: str, stack_name: str) -> None:
    """Invoke a module with its stack configuration

    The stack name selects the module, ``eks-cluster`` runs ``modules/{provider}/eks_cluster``.
    Any error raised while building (including a failed role provisioning) propagates and fails the update.

    :param provider: A provider
    :param stack_name: The stack name
    :return: None
    """
    provider = get_provider_override() or provider

    module = get_module_manager().get_module(provider, stack_name)

    log.debug(f"running module `{stack_name}`")

    exports = module.run(stack_name)

    export(stack_name, outputs_from_exports(exports, stack_name)[stack_name])


def run_active_stack(provider: str) -> None:
    """Invoke the active module with its configuration

    :param provider: A provider
    :return: None
    """
    stack = get_stack()

    log.debug(f"active stack is `{stack}`")

    run_stack(provider, stack)


# Configure the log level on import, config discovery logs before any stack runs
if os.getenv("KUBETS_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
    msg = "kubets logging enabled"
    log.debug(msg)
    logging.debug(msg)
