"""
uidl_vue - generate Vue components from UIDL component descriptions.
"""

from .codegen import generate_from_uidl, get_generator
from .codegen.core import (
    Diagnostics,
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    UnsupportedPropTypeError,
    load_config,
)
from .codegen.vue import VueGenerator, extract_state_object, generate_vue_component_js
from .uidl import (
    ComponentUIDL,
    PropCallStatement,
    PropDefinition,
    PropType,
    StateChangeStatement,
    StateDefinition,
    component_uidl_from_dict,
)
from .utils import UIDLLoadError, load_uidl

__version__ = "0.1.0"

__all__ = [
    "ComponentUIDL",
    "Diagnostics",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "PropCallStatement",
    "PropDefinition",
    "PropType",
    "StateChangeStatement",
    "StateDefinition",
    "UIDLLoadError",
    "UnsupportedPropTypeError",
    "VueGenerator",
    "component_uidl_from_dict",
    "extract_state_object",
    "generate_from_uidl",
    "generate_vue_component_js",
    "get_generator",
    "load_config",
    "load_uidl",
]
