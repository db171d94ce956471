"""
Vue component generation.

Generates Vue option-API component declarations from UIDL.
"""

from .component import ComponentAssembler, generate_vue_component_js
from .generator import VueGenerator
from .methods import EventStatementCompiler
from .props import PROP_RUNTIME_TYPES, PropsMapper
from .state import extract_state_object

__all__ = [
    "ComponentAssembler",
    "EventStatementCompiler",
    "PropsMapper",
    "PROP_RUNTIME_TYPES",
    "VueGenerator",
    "extract_state_object",
    "generate_vue_component_js",
]
