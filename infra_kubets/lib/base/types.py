from typing import TypeVar

ConfigType = TypeVar("ConfigType")
"""A module's stack configuration, expressed as a dataclass"""

ExportsType = TypeVar("ExportsType")
"""A module's exports, expressed as a dataclass (or list of dataclasses)"""
