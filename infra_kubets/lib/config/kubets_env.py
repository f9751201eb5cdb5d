import logging
import sys
from collections import UserDict
from pathlib import Path
from typing import Any, Optional

import hiyapyco

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "Kubets.common.yaml"


class KubetsConfigException(Exception):
    def __init__(self, key):
        super().__init__(f"Missing required configuration variable '{key}'")
        self.key = key


class HierarchicalConfig(UserDict):
    """
    HierarchicalConfig is a UserDict that loads configuration from a tiered set of config files.

    This class will load `Kubets.common.yaml` from the directory of the entrypoint that calls this class, and will
    walk the filesystem upwards a configurable number of times to find other `Kubets.common.yaml` files.

    The discovered files will be merged using a YAML object merger (HiYaPyCo) that supports Jinja2 syntax. Files
    closer to the entrypoint win.

    Typically, you won't use this class directly, and instead will call ``get_kubets_env()``

    Example usage:
        from infra_kubets.lib.config import get_kubets_env

        get_kubets_env().get("myconfig", "somedefault")
        get_kubets_env().require("myotherconfig")

    """

    def __init__(self, limit=5, filename=CONFIG_FILENAME, entrypoint: Optional[Path] = None):
        """
        Create a HierarchicalConfig UserDict

        :param limit: Max parent directories to walk
        :param filename: Filename to find and merge
        :param entrypoint: Path to start the search from, defaults to the `__main__` module
        """
        super().__init__()
        self.filename = filename
        configs = list(reversed(self._discover_configs(limit, entrypoint or self._find_entrypoint())))
        logger.debug("Found configs in %s", configs)

        if configs:
            loader = hiyapyco.load([str(path) for path in configs], method=hiyapyco.METHOD_MERGE)
            # expose the data from the loader as our UserDict backing store
            self.data = dict(loader or {})

    def require(self, key: str) -> Any:
        """
        Require a key from the configuration and return it. If not found, throw a `KubetsConfigException`

        :param key: Key string to require from the configuration
        :return: Object
        """
        if v := self.get(key):
            return v
        else:
            raise KubetsConfigException(key)

    @staticmethod
    def _find_entrypoint() -> Path:
        main_module = sys.modules["__main__"]
        if not hasattr(main_module, "__file__"):
            raise Exception(
                "Can't find __file__ for __main__. HINT: Don't use HierarchicalConfig from a REPL if you are."
            )

        return Path(main_module.__file__).absolute()

    def _discover_configs(self, limit: int, entrypoint: Path) -> list[Path]:
        """
        Walk upwards from the entrypoint and collect every config file found, nearest first

        :param limit: Max parent directories to walk
        :param entrypoint: File or directory to start from
        :return: Config paths, nearest first
        """
        config_paths = []
        logger.debug("Entrypoint: %s", entrypoint)

        # a directory entrypoint may hold a config itself
        if entrypoint.is_dir():
            local_config = entrypoint / self.filename
            if local_config.exists():
                logger.debug("Detected local config [%s]", local_config)
                config_paths.append(local_config)

        for path in list(entrypoint.parents)[:limit]:
            logger.debug("Looking in [%s] for [%s]", path, self.filename)
            maybe_config = path / self.filename
            if maybe_config.exists():
                logger.debug("Detected parent config [%s]", maybe_config)
                config_paths.append(maybe_config)

            # stop at the project root, a config there is still picked up
            if (path / ".git").is_dir():
                logger.debug("Found project root, breaking")
                break

        return config_paths
