from .kebab_from_snake import kebab_from_snake, kebab_from_camel
from .outputs_from_exports import outputs_from_exports
from .run_once import run_once
