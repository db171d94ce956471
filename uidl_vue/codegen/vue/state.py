"""Initial ``data`` of a component, projected from its state definitions."""

from typing import Any, Dict, Mapping

from ...uidl import StateDefinition


def extract_state_object(state_definitions: Mapping[str, StateDefinition]) -> Dict[str, Any]:
    """Map each state key to its default value."""
    return {key: definition.default_value for key, definition in state_definitions.items()}
