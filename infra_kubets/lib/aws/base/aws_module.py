from abc import ABC

from pulumi import ResourceOptions
from pulumi_aws import get_partition

from infra_kubets.lib.base import BaseModule, ConfigType


class AWSModule(BaseModule, ABC):
    """
    Base class for kubets modules that declare AWS resources.

    Exposes the partition of the target account, managed policy ARNs are built from it.
    """

    provider: str = "aws"

    def __init__(self, name: str, config: ConfigType, opts: ResourceOptions = None):
        super().__init__(name, config, opts)

        self.partition: str = get_partition().partition
