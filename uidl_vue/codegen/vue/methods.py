"""
Event handler compilation.

Turns the declarative statements attached to UIDL events into the bodies of
Vue methods. State changes become assignments on ``this``; prop calls become
``this.$emit`` calls, since a Vue child notifies its parent through events
rather than by invoking a callback it received as a prop.
"""

from typing import Dict, List, Mapping, Optional, Sequence

from ...logging_config import get_logger
from ...uidl import (
    EventHandlerStatement,
    PropCallStatement,
    PropDefinition,
    StateChangeStatement,
)
from ..core import nodes
from ..core.builder import SyntaxBuilder, get_default_builder
from ..core.diagnostics import MISSING_CALLS, UNKNOWN_PROP, Diagnostics

logger = get_logger(__name__)

EMIT_METHOD = "$emit"


class EventStatementCompiler:
    """Compiles event handler statements into method body statements."""

    def __init__(
        self,
        builder: Optional[SyntaxBuilder] = None,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.builder = builder or get_default_builder()
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()

    def compile_methods(
        self,
        methods: Mapping[str, Sequence[EventHandlerStatement]],
        prop_definitions: Optional[Mapping[str, PropDefinition]] = None,
    ) -> Dict[str, List[nodes.Statement]]:
        """
        Compile every event's statements, keeping event order.

        Statements that cannot be compiled are left out of the body and
        reported through ``self.diagnostics``.
        """
        prop_definitions = prop_definitions or {}
        compiled: Dict[str, List[nodes.Statement]] = {}

        for event_name, statements in methods.items():
            body = []
            for index, statement in enumerate(statements):
                location = f"{event_name}[{index}]"
                compiled_statement = self.compile_statement(
                    statement, prop_definitions, location
                )
                if compiled_statement is not None:
                    body.append(compiled_statement)
            compiled[event_name] = body
            logger.debug(
                "Compiled %s: %d of %d statements", event_name, len(body), len(statements)
            )

        return compiled

    def compile_statement(
        self,
        statement: EventHandlerStatement,
        prop_definitions: Mapping[str, PropDefinition],
        location: Optional[str] = None,
    ) -> Optional[nodes.Statement]:
        if isinstance(statement, PropCallStatement):
            return self.compile_prop_call(statement, prop_definitions, location)
        return self.compile_state_change(statement)

    def compile_state_change(self, statement: StateChangeStatement) -> nodes.Statement:
        """``this.x = <value>``, or ``this.x = !this.x`` for ``$toggle``."""
        b = self.builder

        if statement.is_toggle:
            right = b.unary_expression("!", b.this_member(statement.modifies))
        else:
            right = b.convert_value_to_literal(statement.new_state)

        return b.expression_statement(
            b.assignment_expression("=", b.this_member(statement.modifies), right)
        )

    def compile_prop_call(
        self,
        statement: PropCallStatement,
        prop_definitions: Mapping[str, PropDefinition],
        location: Optional[str] = None,
    ) -> Optional[nodes.Statement]:
        """``this.$emit('<calls>', ...args)``, or None if the prop is unknown."""
        prop_name = statement.calls

        if not prop_name:
            self.diagnostics.warn(
                MISSING_CALLS,
                'No prop definition referenced under the "calls" field',
                location,
            )
            return None

        if prop_definitions.get(prop_name) is None:
            self.diagnostics.warn(
                UNKNOWN_PROP,
                f'No prop definition was found for function "{prop_name}"',
                location,
            )
            return None

        b = self.builder
        arguments = [b.string_literal(prop_name)]
        arguments.extend(b.convert_value_to_literal(arg) for arg in statement.args)

        return b.expression_statement(
            b.call_expression(b.this_member(EMIT_METHOD), arguments)
        )
