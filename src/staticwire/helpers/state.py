"""Render component state as a JavaScript object literal."""

import json
import re
from typing import Any

from staticwire.core.nodes import (
    FUNCTION_LITERAL_PREFIX,
    GETTER_LITERAL_PREFIX,
    METHOD_LITERAL_PREFIX,
    Component,
)

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][\w$]*$")


def _key_source(key: str) -> str:
    if _IDENTIFIER_RE.match(key):
        return key
    return json.dumps(key)


def _entry_source(key: str, value: Any) -> str:
    if isinstance(value, str):
        if value.startswith(FUNCTION_LITERAL_PREFIX):
            return f"{_key_source(key)}: {value[len(FUNCTION_LITERAL_PREFIX):]}"
        if value.startswith(METHOD_LITERAL_PREFIX):
            return value[len(METHOD_LITERAL_PREFIX) :]
        if value.startswith(GETTER_LITERAL_PREFIX):
            return value[len(GETTER_LITERAL_PREFIX) :]
    return f"{_key_source(key)}: {json.dumps(value)}"


def get_state_object_string(component: Component) -> str:
    """Return the state mapping as object-literal source, e.g. { count: 0 }."""
    if not component.state:
        return "{}"
    entries = ", ".join(
        _entry_source(key, value) for key, value in component.state.items()
    )
    return f"{{ {entries} }}"
