"""
UIDL Vue Code Generation Module

Generates Vue components from UIDL component descriptions.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..uidl import component_uidl_from_dict, event_handlers_from_dict
from .core.config import GeneratorConfig, load_config
from .core.generator import GenerationResult, GeneratorError, generate_code
from .vue import VueGenerator


def get_generator(
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> VueGenerator:
    """
    Create a Vue generator.

    Args:
        config: Configuration as GeneratorConfig, dict of overrides, or path
            to a JSON configuration file

    Returns:
        Configured generator instance
    """
    if isinstance(config, GeneratorConfig):
        final_config = config
    elif isinstance(config, (str, Path)):
        final_config = load_config(config_file=config)
    elif isinstance(config, dict):
        final_config = load_config(custom_config=config)
    elif config is None:
        final_config = load_config()
    else:
        raise GeneratorError(f"Invalid config type: {type(config)}")

    return VueGenerator(final_config)


def generate_from_uidl(
    document: Mapping[str, Any],
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> GenerationResult:
    """
    Generate a Vue component from a UIDL document.

    The document is a UIDL component (``name``, ``propDefinitions``,
    ``stateDefinitions``) that may also carry the already resolved
    ``dependencies`` list and the ``methods`` mapping of event handlers.

    Args:
        document: Parsed JSON document
        config: Generator configuration

    Returns:
        GenerationResult with generated code
    """
    uidl = component_uidl_from_dict(document)
    dependencies = list(document.get("dependencies") or [])
    methods = event_handlers_from_dict(document.get("methods"))

    generator = get_generator(config)
    return generate_code(generator, uidl, dependencies, methods)


__version__ = "0.1.0"

__all__ = [
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "VueGenerator",
    "generate_code",
    "generate_from_uidl",
    "get_generator",
    "load_config",
]
