"""
Vue component assembly.

Builds the ``export default { ... }`` declaration of a component from its UIDL
and the pieces computed by the caller. Options appear in a fixed order:
``name``, ``props``, ``components``, ``data``, ``methods``.
"""

from typing import Any, Mapping, Optional, Sequence

from ...logging_config import get_logger
from ...uidl import ComponentUIDL, EventHandlerStatement
from ..core import nodes
from ..core.builder import SyntaxBuilder, get_default_builder
from ..core.diagnostics import Diagnostics
from ..core.generator import GeneratorError
from ..core.naming import is_valid_identifier
from .methods import EventStatementCompiler
from .props import PropsMapper

logger = get_logger(__name__)


class ComponentAssembler:
    """Composes prop, data and method generation into one declaration."""

    def __init__(
        self,
        builder: Optional[SyntaxBuilder] = None,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.builder = builder or get_default_builder()
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.props_mapper = PropsMapper(self.builder)
        self.statement_compiler = EventStatementCompiler(self.builder, self.diagnostics)

    def assemble(
        self,
        uidl: ComponentUIDL,
        dependencies: Sequence[str],
        data: Mapping[str, Any],
        methods: Mapping[str, Sequence[EventHandlerStatement]],
    ) -> nodes.ExportDefaultDeclaration:
        """
        Build the component declaration.

        Args:
            uidl: Component description
            dependencies: Names of child components, already resolved
            data: Initial state, usually from ``extract_state_object``
            methods: Event name to handler statements

        Returns:
            ``export default`` declaration wrapping the options object

        Raises:
            UnsupportedPropTypeError: If a prop has an unknown type tag
            GeneratorError: If a dependency name is not a JavaScript identifier
        """
        b = self.builder
        properties = [
            b.object_property(b.identifier("name"), b.string_literal(uidl.name))
        ]

        if uidl.prop_definitions:
            properties.append(
                b.object_property(b.identifier("props"), self._props(uidl))
            )

        if dependencies:
            properties.append(
                b.object_property(b.identifier("components"), self._components(dependencies))
            )

        if data:
            properties.append(self._data(data))

        if methods:
            properties.append(
                b.object_property(b.identifier("methods"), self._methods(uidl, methods))
            )

        logger.debug(
            "Assembled component %s with options: %s",
            uidl.name,
            ", ".join(p.key.name for p in properties),
        )
        return b.export_default_declaration(b.object_expression(properties))

    def _props(self, uidl: ComponentUIDL) -> nodes.ObjectExpression:
        descriptors = self.props_mapper.map_props(uidl.prop_definitions)
        return self.props_mapper.to_object_expression(descriptors)

    def _components(self, dependencies: Sequence[str]) -> nodes.ObjectExpression:
        # Shorthand entries reference an imported binding of the same name
        for name in dependencies:
            if not is_valid_identifier(name):
                raise GeneratorError(
                    f"Dependency name {name!r} is not a valid JavaScript identifier"
                )

        b = self.builder
        return b.object_expression(
            b.object_property(b.identifier(name), b.identifier(name), shorthand=True)
            for name in dependencies
        )

    def _data(self, data: Mapping[str, Any]) -> nodes.ObjectMethod:
        b = self.builder
        body = b.block_statement([b.return_statement(b.object_to_object_expression(data))])
        return b.object_method(b.identifier("data"), [], body)

    def _methods(
        self,
        uidl: ComponentUIDL,
        methods: Mapping[str, Sequence[EventHandlerStatement]],
    ) -> nodes.ObjectExpression:
        b = self.builder
        compiled = self.statement_compiler.compile_methods(methods, uidl.prop_definitions)
        return b.object_expression(
            b.object_method(b.property_key(event_name), [], b.block_statement(statements))
            for event_name, statements in compiled.items()
        )


def generate_vue_component_js(
    uidl: ComponentUIDL,
    dependencies: Sequence[str],
    data: Mapping[str, Any],
    methods: Mapping[str, Sequence[EventHandlerStatement]],
    builder: Optional[SyntaxBuilder] = None,
    diagnostics: Optional[Diagnostics] = None,
) -> nodes.ExportDefaultDeclaration:
    """Functional entry point around :class:`ComponentAssembler`."""
    return ComponentAssembler(builder, diagnostics).assemble(
        uidl, dependencies, data, methods
    )
