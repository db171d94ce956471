"""
Base generator interface and error types.

Defines the contract a component generator implements and the result object
returned by :func:`generate_code`.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ...logging_config import get_logger
from ...uidl import ComponentUIDL, EventHandlerStatement
from .config import GeneratorConfig
from .diagnostics import Diagnostics
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class UnsupportedPropTypeError(GeneratorError):
    """Raised when a prop definition carries a type tag with no runtime type."""

    def __init__(self, prop_name: str, definition: Dict[str, Any]):
        self.prop_name = prop_name
        self.definition = definition
        super().__init__(
            f"Unsupported prop type for '{prop_name}': {json.dumps(definition, default=repr)}"
        )


class CodeGenerator(ABC):
    """Abstract base class for component generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self.diagnostics = Diagnostics()
        self._template_engine = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target component model (e.g., 'vue')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.vue')."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            template_dir = self.config.template_dir
            self._template_engine = create_template_engine(
                Path(template_dir) if template_dir else None
            )
        return self._template_engine

    @abstractmethod
    def generate(
        self,
        uidl: ComponentUIDL,
        dependencies: Sequence[str] = (),
        methods: Optional[Mapping[str, Sequence[EventHandlerStatement]]] = None,
    ) -> str:
        """
        Generate source code for one component.

        Args:
            uidl: Component description
            dependencies: Names of the components this one renders
            methods: Event name to handler statements

        Returns:
            Generated code as a string
        """
        pass

    def format_code(self, code: str) -> str:
        """
        Normalize whitespace and line endings of generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code ending with a single newline
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:  # Collapse runs of blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        text = "\n".join(formatted_lines).strip("\n") + "\n"
        if self.config.line_ending != "\n":
            text = text.replace("\n", self.config.line_ending)
        return text


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Diagnostics raised during generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator,
    uidl: ComponentUIDL,
    dependencies: Sequence[str] = (),
    methods: Optional[Mapping[str, Sequence[EventHandlerStatement]]] = None,
) -> GenerationResult:
    """
    Generate a component and wrap the outcome in a GenerationResult.

    Generator errors (including unsupported prop types) become a failed
    result; anything else propagates.

    Args:
        generator: Component generator instance
        uidl: Component description
        dependencies: Names of the components this one renders
        methods: Event name to handler statements

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    methods = methods or {}
    logger.info("Generating %s component: %s", generator.language_name, uidl.name)

    try:
        code = generator.generate(uidl, dependencies, methods)
    except GeneratorError as e:
        logger.error("Generation of %s failed: %s", uidl.name, e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    formatted_code = generator.format_code(code)

    metadata = {
        "component": uidl.name,
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "prop_count": len(uidl.prop_definitions),
        "state_count": len(uidl.state_definitions),
        "method_count": len(methods),
        "dependency_count": len(dependencies),
    }

    logger.debug("Generated %s with %d warnings", uidl.name, len(generator.diagnostics))
    return GenerationResult(formatted_code, generator.diagnostics.messages(), metadata)
