from abc import ABC, abstractmethod
from typing import Type, get_type_hints

from pulumi import ComponentResource, ResourceOptions, log

from infra_kubets.lib.base.types import ConfigType, ExportsType
from infra_kubets.lib.utils import outputs_from_exports, run_once


class BaseModule(ComponentResource, ABC):
    """
    The base class for a kubets module
    """

    @property
    @abstractmethod
    def provider(self):
        """Name of the provider"""

    def __init__(self, name: str, config: ConfigType, opts: ResourceOptions = None):
        super().__init__(
            f"pkg:kubets:{self.provider}:{self.__class__.__name__.lower()}",
            name,
            None,
            opts,
        )

        self.stack_name = name
        self._config = config

    @classmethod
    @run_once
    def get_config_type(cls) -> Type[ConfigType]:
        try:
            return get_type_hints(cls.build)["config"]
        except KeyError:
            raise TypeError(f"module `{cls.__name__}.build` method does not have a type hint for the `config` param")

    def run(self) -> ExportsType:
        """Execute the module

        :return: An exports object
        """
        log.debug(f"building `{self.__class__.__name__}` for stack `{self.stack_name}`", resource=self)

        exports = self.build(self._config)

        self.register_outputs(outputs_from_exports(exports, self.stack_name))

        return exports

    @abstractmethod
    def build(self, config: ConfigType) -> ExportsType:
        """Create cloud resources

        :return: An exports object
        """
