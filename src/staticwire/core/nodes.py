"""Component tree data model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Reserved tag names
FRAGMENT = "Fragment"
FOR = "For"
SHOW = "Show"

# Reserved property / binding keys
TEXT_KEY = "_text"
FOR_EACH_KEY = "each"
FOR_NAME_KEY = "_forName"
SHOW_WHEN_KEY = "when"
SPREAD_KEY = "_spread"
REF_KEY = "ref"
CSS_KEY = "css"

# Correlation attribute linking markup to generated update code
UID_ATTRIBUTE = "data-uid"

# Prefixes marking state values that are code rather than literals
FUNCTION_LITERAL_PREFIX = "@function:"
METHOD_LITERAL_PREFIX = "@method:"
GETTER_LITERAL_PREFIX = "@getter:"


@dataclass
class Node:
    """A single element, text leaf or control-flow construct."""

    name: str = "div"
    properties: Dict[str, str] = field(default_factory=dict)
    bindings: Dict[str, str] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        bindings = {}
        for key, value in (data.get("bindings") or {}).items():
            # {"code": "..."} is accepted alongside plain expression strings
            if isinstance(value, dict):
                value = value.get("code", "")
            bindings[key] = value

        return cls(
            name=data.get("name") or "div",
            properties=dict(data.get("properties") or {}),
            bindings=bindings,
            children=[cls.from_dict(child) for child in data.get("children") or []],
        )


@dataclass
class Component:
    """Root of a component tree: reactive state plus top-level children."""

    state: Dict[str, Any] = field(default_factory=dict)
    children: List[Node] = field(default_factory=list)
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Component":
        return cls(
            state=dict(data.get("state") or {}),
            children=[Node.from_dict(child) for child in data.get("children") or []],
            name=data.get("name"),
        )
