"""
Vue prop descriptors.

Maps UIDL prop definitions to the entries of a component's ``props`` option:
a bare runtime type (``String``) or a descriptor object
(``{ required, type, default }``).
"""

from typing import Any, Dict, Mapping, Optional, Union

from ...logging_config import get_logger
from ...uidl import PropDefinition, PropType
from ..core import nodes
from ..core.builder import SyntaxBuilder, get_default_builder
from ..core.generator import UnsupportedPropTypeError

logger = get_logger(__name__)

# Runtime constructors Vue checks prop values against
PROP_RUNTIME_TYPES: Dict[PropType, str] = {
    PropType.STRING: "String",
    PropType.NUMBER: "Number",
    PropType.BOOLEAN: "Boolean",
    PropType.ARRAY: "Array",
    PropType.OBJECT: "Object",
    PropType.FUNC: "Function",
}

# Reference-typed defaults must be produced by a factory so instances
# never share one mutable value
FACTORY_DEFAULT_TYPES = {PropType.ARRAY, PropType.OBJECT}

PropDescriptor = Union[nodes.Identifier, Dict[str, Any]]


class PropsMapper:
    """Builds Vue prop descriptors from UIDL prop definitions."""

    def __init__(self, builder: Optional[SyntaxBuilder] = None):
        self.builder = builder or get_default_builder()

    def map_props(
        self, prop_definitions: Mapping[str, PropDefinition]
    ) -> Dict[str, PropDescriptor]:
        """
        Map every prop definition to its descriptor, keeping declaration order.

        Raises:
            UnsupportedPropTypeError: If a definition has an unknown type tag
        """
        descriptors: Dict[str, PropDescriptor] = {}
        for name, definition in prop_definitions.items():
            descriptors[name] = self.map_prop(name, definition)
        return descriptors

    def map_prop(self, name: str, definition: PropDefinition) -> PropDescriptor:
        """Map a single prop definition."""
        prop_type = self._resolve_type(name, definition)
        runtime_type = self.builder.identifier(PROP_RUNTIME_TYPES[prop_type])

        descriptor: PropDescriptor = runtime_type
        if definition.has_default:
            descriptor = {
                "type": runtime_type,
                "default": self._default_value(prop_type, definition.default_value),
            }

        if definition.is_required:
            # Existing fields win over the merged-in flag
            existing = descriptor if isinstance(descriptor, dict) else {"type": descriptor}
            descriptor = {"required": True, **existing}

        return descriptor

    def to_object_expression(
        self, descriptors: Mapping[str, PropDescriptor]
    ) -> nodes.ObjectExpression:
        """Convert mapped descriptors into the ``props`` object expression."""
        return self.builder.object_to_object_expression(descriptors)

    def _resolve_type(self, name: str, definition: PropDefinition) -> PropType:
        try:
            return PropType(definition.type)
        except ValueError:
            logger.error("Unsupported prop type %r for prop %s", definition.type, name)
            raise UnsupportedPropTypeError(name, definition.to_dict()) from None

    def _default_value(self, prop_type: PropType, value: Any) -> Any:
        if prop_type in FACTORY_DEFAULT_TYPES:
            return self.builder.arrow_function_expression(
                [], self.builder.convert_value_to_literal(value)
            )
        return value
