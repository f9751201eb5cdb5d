from typing import Optional

from pulumi import Config

from infra_kubets.lib.utils import run_once
from .kubets_env import HierarchicalConfig

aws_config = Config("aws")
kubets_config = Config("kubets")


@run_once
def get_kubets_env() -> HierarchicalConfig:
    """
    Load the hierarchical `Kubets.common.yaml` configuration once per program

    :return: Merged configuration
    """
    return HierarchicalConfig()


def get_tag_namespace() -> str:
    """Resources created using the tagging libraries kubets provides use this to prefix the standard tags.
    This differs from the Pulumi config namespace, as this is used for the actual resources, not the Pulumi config itself.
    """
    return get_kubets_env().get("tag_namespace", "kubets")


def get_tag_prefix() -> str:
    return f"{get_tag_namespace()}{get_kubets_env().get('tag_separator', ':')}"


def get_team() -> str:
    return get_kubets_env().require("team")


def get_region() -> str:
    return aws_config.require("region")


def get_purpose() -> str:
    return get_kubets_env().require("purpose")


def get_phase() -> str:
    return get_kubets_env().require("phase")


@run_once
def get_sysenv() -> str:
    """
    Returns the SysEnv name for this program
    SysEnvs are named `{namespace}-aws-{region}-{purpose}-{phase}`.

    An example SysEnv name is `kt-aws-ap-northeast-1-sandbox-dev`

    Can be overridden by setting `sysenv` in your Kubets.common.yaml

    :return: SysEnv name
    """
    kubets_env = get_kubets_env()

    if config_sysenv := kubets_env.get("sysenv"):
        return config_sysenv

    return f"{kubets_env.require('namespace')}-aws-{get_region()}-{get_purpose()}-{get_phase()}"


def get_provider_override() -> Optional[str]:
    """
    Retrieve the provider override for the current module (`kubets:provider: myprovider`)

    :return: Provider name, if overridden
    """
    return kubets_config.get("provider")
