"""
UIDL data model.

Framework-independent description of a component: its props, its local state
and the declarative statements run by its event handlers. The loader functions
convert the camelCase JSON shape into these dataclasses without validating it
beyond what is needed to build the objects.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .logging_config import get_logger

logger = get_logger(__name__)


class PropType(Enum):
    """Prop type tags understood by the generator."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    FUNC = "func"


class _Unset:
    """Marker for a default value the UIDL does not define."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()

TOGGLE = "$toggle"


@dataclass(frozen=True)
class PropDefinition:
    """A single prop as declared in the UIDL."""

    type: Union[PropType, str]
    default_value: Any = UNSET
    is_required: bool = False

    @property
    def has_default(self) -> bool:
        return self.default_value is not UNSET

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the UIDL JSON shape."""
        result: Dict[str, Any] = {
            "type": self.type.value if isinstance(self.type, PropType) else self.type
        }
        if self.has_default:
            result["defaultValue"] = self.default_value
        if self.is_required:
            result["isRequired"] = True
        return result


@dataclass(frozen=True)
class StateDefinition:
    """Local component state and its initial value."""

    default_value: Any = None


@dataclass(frozen=True)
class StateChangeStatement:
    """Assign a new value to a state field, or flip it with ``$toggle``."""

    modifies: str
    new_state: Any
    type: str = field(default="stateChange", init=False)

    @property
    def is_toggle(self) -> bool:
        return self.new_state == TOGGLE


@dataclass(frozen=True)
class PropCallStatement:
    """Invoke a capability the parent passed in as a prop."""

    calls: Optional[str]
    args: Tuple[Any, ...] = ()
    type: str = field(default="propCall", init=False)


EventHandlerStatement = Union[StateChangeStatement, PropCallStatement]


@dataclass(frozen=True)
class ComponentUIDL:
    """The parts of a component description this package generates from."""

    name: str
    prop_definitions: Dict[str, PropDefinition] = field(default_factory=dict)
    state_definitions: Dict[str, StateDefinition] = field(default_factory=dict)


def prop_definition_from_dict(data: Mapping[str, Any]) -> PropDefinition:
    """Build a PropDefinition from its JSON form.

    The type tag is kept verbatim when it is not a known PropType so that the
    props mapper can report it with the full definition.
    """
    raw_type = data.get("type")
    try:
        prop_type: Union[PropType, str] = PropType(raw_type)
    except ValueError:
        prop_type = raw_type

    return PropDefinition(
        type=prop_type,
        default_value=data["defaultValue"] if "defaultValue" in data else UNSET,
        is_required=bool(data.get("isRequired", False)),
    )


def statement_from_dict(data: Mapping[str, Any]) -> EventHandlerStatement:
    """Build an event handler statement from its JSON form."""
    if data.get("type") == "propCall":
        return PropCallStatement(
            calls=data.get("calls"), args=tuple(data.get("args") or ())
        )
    return StateChangeStatement(
        modifies=data.get("modifies", ""), new_state=data.get("newState")
    )


def event_handlers_from_dict(
    data: Optional[Mapping[str, Any]],
) -> Dict[str, List[EventHandlerStatement]]:
    """Convert an ``event name -> [statement, ...]`` mapping."""
    handlers: Dict[str, List[EventHandlerStatement]] = {}
    for event_name, statements in (data or {}).items():
        handlers[event_name] = [statement_from_dict(s) for s in statements or []]
    return handlers


def component_uidl_from_dict(data: Mapping[str, Any]) -> ComponentUIDL:
    """
    Convert a UIDL component document into a ComponentUIDL.

    Args:
        data: Parsed JSON with ``name`` and optional ``propDefinitions`` and
            ``stateDefinitions``

    Returns:
        ComponentUIDL
    """
    props = {
        name: prop_definition_from_dict(definition)
        for name, definition in (data.get("propDefinitions") or {}).items()
    }
    states = {
        name: StateDefinition(default_value=definition.get("defaultValue"))
        for name, definition in (data.get("stateDefinitions") or {}).items()
    }

    name = data.get("name", "")
    logger.debug(
        "Loaded UIDL component %s (%d props, %d states)", name, len(props), len(states)
    )
    return ComponentUIDL(name=name, prop_definitions=props, state_definitions=states)
