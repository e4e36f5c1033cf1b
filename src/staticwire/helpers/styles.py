"""Collect per-node style objects into a single stylesheet."""

import json
import logging
import re
from collections import defaultdict
from typing import Any, Dict, Iterator, List

from staticwire.core.nodes import CSS_KEY, Component, Node
from staticwire.helpers.case import dash_case

log = logging.getLogger(__name__)

_HEADING_RE = re.compile(r"^h\d$")


def _walk(nodes: List[Node]) -> Iterator[Node]:
    for node in nodes:
        yield node
        yield from _walk(node.children)


def _class_prefix(node: Node) -> str:
    if _HEADING_RE.match(node.name):
        return node.name
    return dash_case(node.name) or "div"


def collect_styles(component: Component) -> Dict[str, Dict[str, Any]]:
    """Move every node's css binding onto a generated class.

    Mutates the tree: the css binding is removed and the generated class name
    is appended to the node's class property. Returns {class_name: style}.
    """
    styles: Dict[str, Dict[str, Any]] = {}
    indexes: Dict[str, int] = defaultdict(int)

    for node in _walk(component.children):
        raw = node.bindings.get(CSS_KEY)
        if not isinstance(raw, str):
            continue

        del node.bindings[CSS_KEY]
        try:
            value = json.loads(raw)
        except ValueError as e:
            log.warning(f"Skipping invalid css binding on <{node.name}>: {e}")
            continue
        if not isinstance(value, dict):
            log.warning(f"Skipping non-object css binding on <{node.name}>")
            continue

        prefix = _class_prefix(node)
        indexes[prefix] += 1
        class_name = f"{prefix}-{indexes[prefix]}"

        existing = node.properties.get("class", "")
        node.properties["class"] = f"{existing} {class_name}".strip()
        styles[class_name] = value

    return styles


def style_object_to_css(style: Dict[str, Any]) -> str:
    """Render the flat (non-nested) declarations of a style object."""
    lines = []
    for key, value in style.items():
        if isinstance(value, dict):
            continue
        lines.append(f"  {dash_case(key) if key[:1] != '-' else key}: {value};")
    return "\n".join(lines)


def _render_rule(selector: str, style: Dict[str, Any]) -> str:
    css = ""
    declarations = style_object_to_css(style)
    if declarations:
        css += f"{selector} {{\n{declarations}\n}}\n"

    # Nested objects are at-rules (@media ...) wrapping the same selector
    for key, value in style.items():
        if isinstance(value, dict) and value:
            inner = _render_rule(selector, value)
            if inner:
                css += f"{key} {{\n{inner}}}\n"
    return css


def collect_css(component: Component) -> str:
    """Return the aggregated stylesheet for the tree, or an empty string."""
    styles = collect_styles(component)
    return "".join(
        _render_rule(f".{class_name}", style) for class_name, style in styles.items()
    )
