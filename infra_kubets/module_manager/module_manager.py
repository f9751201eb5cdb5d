from pulumi import log

from infra_kubets.lib.utils import run_once
from .discover_modules import discover_modules
from .lazy_module import LazyModule


class _ModuleManager:
    """Stores and hands out kubets modules."""

    def __init__(self, modules: dict[str, dict[str, LazyModule]] = None):
        """Initialize the module manager

        The ``modules`` instance attribute would look like::

            {
                "aws": {
                    "eks-cluster": LazyModule(provider='aws', name='eks_cluster'),
                    "service-roles": LazyModule(provider='aws', name='service_roles'),
                },
            }
        """
        self.modules = discover_modules() if modules is None else modules

        log.debug(f"discovered modules `{self.modules}`")

    def get_module(self, provider: str, module_name: str) -> LazyModule:
        """Returns the module's class without calling it.

        :param provider: Provider name
        :param module_name: Module name
        :return: A LazyModule
        """
        try:
            lazy_module = self.modules[provider][module_name]

            log.debug(f"accessing module `{lazy_module}`")

            return lazy_module
        except KeyError:
            raise ModuleNotFoundError(f"module `{module_name}` was not found under provider `{provider}`")


@run_once
def get_module_manager() -> _ModuleManager:
    """The module manager, discovering modules on first use"""
    return _ModuleManager()
