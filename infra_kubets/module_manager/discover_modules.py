from os import walk
from pathlib import Path
from typing import Optional

from pulumi import log

from infra_kubets.lib.utils import kebab_from_snake
from .lazy_module import LazyModule

_package_name = "infra_kubets"
_module_container_name = "modules"


def _get_package_path(path: Optional[Path] = None) -> Path:
    """Walk upwards from this file until the package directory is found"""
    path = path or Path(__file__).absolute()

    for candidate in [path, *path.parents]:
        if candidate.name == _package_name:
            return candidate

    raise Exception(f"module population failed: package is named something other than `{_package_name}`")


def _get_dirs(path: Path) -> list[str]:
    """Get all directories in ``path`` that don't start with underscore

    :param path: Path to start from
    :return: List of directories in ``path``
    """
    _, dirs, _ = next(walk(path))
    return sorted(d for d in dirs if not d.startswith("_"))


def discover_modules(providers_path: Optional[Path] = None) -> dict[str, dict[str, LazyModule]]:
    """Find all modules

    Assumes that the path to a module is ``infra_kubets/modules/{provider}/{module}``.

    The module folder name is converted from snake to kebab case for the nested dictionary key, which is also the
    stack name that runs it.

    Example::

        # infra_kubets
        # └── modules
        #     └── aws
        #         ├── eks_cluster
        #         └── service_roles

        {
            "aws": {
                "eks-cluster": LazyModule(provider='aws', name='eks_cluster'),
                "service-roles": LazyModule(provider='aws', name='service_roles'),
            },
        }

    :param providers_path: Directory holding the provider directories, defaults to the package's ``modules``
    :return: A mapping of providers to mappings of module names to lazy modules
    """
    if providers_path is None:
        package_path = _get_package_path()

        log.debug(f"identified package path for `{_package_name}` as `{str(package_path)}`")

        providers_path = package_path / _module_container_name

    return {
        provider: {
            kebab_from_snake(module_name): LazyModule(provider, module_name)
            for module_name in _get_dirs(providers_path / provider)
        }
        for provider in _get_dirs(providers_path)
    }
