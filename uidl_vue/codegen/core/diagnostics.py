"""
Non-fatal diagnostics collected while generating a component.

Problems that do not stop generation are recorded here instead of being
printed, so callers can inspect, assert on, or report them as they see fit.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from ...logging_config import get_logger

logger = get_logger(__name__)


# Diagnostic codes
MISSING_CALLS = "missing-calls"
UNKNOWN_PROP = "unknown-prop"


@dataclass(frozen=True)
class Diagnostic:
    """A single non-fatal problem found in the UIDL."""

    code: str
    message: str
    location: Optional[str] = None

    def __str__(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


class Diagnostics:
    """Ordered collection of diagnostics for one generation run."""

    def __init__(self):
        self._items: List[Diagnostic] = []

    def warn(self, code: str, message: str, location: Optional[str] = None) -> Diagnostic:
        """Record a warning and log it."""
        diagnostic = Diagnostic(code, message, location)
        self._items.append(diagnostic)
        logger.warning("%s", diagnostic)
        return diagnostic

    def messages(self) -> List[str]:
        return [str(d) for d in self._items]

    def codes(self) -> List[str]:
        return [d.code for d in self._items]

    def clear(self):
        self._items.clear()

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
