import json
from enum import Enum
from typing import Type, Any

from dacite import from_dict, Config
from pulumi import log, runtime

from infra_kubets.lib.base import ConfigType


def _parse_args_value(value: Any) -> Any:
    """Decode structured config values, leave everything else as the raw string

    Pulumi stores lists, maps and booleans as JSON strings. Scalars are kept as-is so that ``"1.30"`` stays a
    string instead of turning into the float ``1.3``.

    :param value: A potential json string
    :return: Parsed list, dict or bool, or the raw arg
    """
    try:
        parsed = json.loads(value)
    except (json.decoder.JSONDecodeError, TypeError):
        return value

    return parsed if isinstance(parsed, (list, dict, bool)) else value


def parse_stack_config(stack: str, raw_config: dict) -> dict:
    """Keep the keys namespaced under ``stack``, without the namespace, and decode their values

    :param stack: Name of the stack
    :param raw_config: Flat ``namespace:key`` to value mapping
    :return: dict
    """
    stack_prefix = stack + ":"

    return {k.removeprefix(stack_prefix): _parse_args_value(v) for k, v in raw_config.items() if k.startswith(stack_prefix)}


def get_raw_stack_config(stack: str) -> dict:
    """Pull stack config from Pulumi internals, clean it and return in dict form

    This method may break when upgrading the ``pulumi`` python dependency.

    :param stack: Name of the stack
    :return: dict
    """
    config = parse_stack_config(stack, dict(runtime.config.CONFIG.items()))

    log.debug(f"config dict for stack `{stack}` is {config}")

    return config


def map_config(config_cls: Type[ConfigType], data: dict) -> ConfigType:
    """Map a config dict onto a module's config dataclass

    Uses `dacite <https://github.com/konradhalas/dacite>`_ to map dict to dataclass.

    :param config_cls: The dataclass for the config
    :param data: Raw config
    :return: The config expressed in ``config_cls``
    """
    return from_dict(
        data_class=config_cls,
        data=data,
        config=Config(
            cast=[Enum],
            strict=True,
        ),
    )


def get_stack_config(stack: str, config_cls: Type[ConfigType]) -> ConfigType:
    """Get a stack config in dataclass form

    :param stack: Name of the stack
    :param config_cls: The dataclass for the config
    :return: The stack config expressed in the module's config dataclass
    """
    config = map_config(config_cls, get_raw_stack_config(stack))

    log.debug(f"config for stack `{stack}` is {config}")

    return config
