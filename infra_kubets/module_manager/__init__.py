from .discover_modules import discover_modules
from .lazy_module import LazyModule
from .module_manager import get_module_manager
