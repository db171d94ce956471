"""
Core code generation components.

Syntax nodes, the builder and printer, configuration, diagnostics and the
base generator interface.
"""

from .builder import SyntaxBuilder, get_default_builder
from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .diagnostics import Diagnostic, Diagnostics
from .generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    UnsupportedPropTypeError,
    generate_code,
)
from .naming import component_file_stem, is_identifier_name, is_valid_identifier
from .printer import JSPrinter
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Syntax
    "SyntaxBuilder",
    "get_default_builder",
    "JSPrinter",
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "UnsupportedPropTypeError",
    "GenerationResult",
    "generate_code",
    # Diagnostics
    "Diagnostic",
    "Diagnostics",
    # Naming utilities
    "component_file_stem",
    "is_identifier_name",
    "is_valid_identifier",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
