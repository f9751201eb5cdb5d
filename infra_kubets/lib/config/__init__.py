from .core import (
    get_kubets_env,
    get_sysenv,
    get_purpose,
    get_phase,
    get_region,
    get_team,
    get_tag_namespace,
    get_tag_prefix,
    get_provider_override,
)
from .kubets_env import HierarchicalConfig, KubetsConfigException
from .mapper import get_stack_config, map_config, parse_stack_config
