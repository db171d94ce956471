"""
Naming utilities for generated JavaScript.

Decides which names can be emitted unquoted and derives file names from
component names.
"""

import re

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

JS_RESERVED_WORDS = {
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "import", "in", "instanceof", "new",
    "null", "return", "super", "switch", "this", "throw", "true", "try",
    "typeof", "var", "void", "while", "with", "yield", "let", "static",
    "implements", "interface", "package", "private", "protected", "public",
    "await",
}


def is_identifier_name(name: str) -> bool:
    """True if ``name`` can follow a dot or stand unquoted as an object key."""
    return bool(_IDENTIFIER_RE.match(name))


def is_valid_identifier(name: str) -> bool:
    """True if ``name`` can be emitted as a bare identifier reference."""
    return is_identifier_name(name) and name not in JS_RESERVED_WORDS


def _split_words(name: str) -> list:
    """Split on separators and lower-to-upper case boundaries."""
    spaced = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", name)
    return [word for word in re.split(r"[\s_-]+", spaced) if word]


def component_file_stem(name: str) -> str:
    """Kebab-case file name stem for a component (``UserCard`` -> ``user-card``)."""
    cleaned = re.sub(r"[^a-zA-Z0-9_-]", "_", name).strip("_-")
    words = _split_words(cleaned)
    if not words:
        return "component"
    return "-".join(word.lower() for word in words)
