"""Load component descriptions from JSON."""

import json
from pathlib import Path
from typing import Any, Dict

from staticwire.compiler.exceptions import ComponentLoadError
from staticwire.core.nodes import Component


def load_component(file_path: Path) -> Component:
    """Load a component from a JSON file."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ComponentLoadError(f"Could not read file: {e}", file_path=str(file_path))

    return parse_component(content, str(file_path))


def parse_component(content: str, file_path: str = "") -> Component:
    """Parse a JSON component description."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ComponentLoadError(
            f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}",
            file_path=file_path or None,
        )

    if not isinstance(data, dict):
        raise ComponentLoadError(
            "Component must be a JSON object", file_path=file_path or None
        )

    _check_container(data, "state", dict, file_path)
    _check_nodes(data.get("children"), "children", file_path)

    return Component.from_dict(data)


def _check_container(
    data: Dict[str, Any], key: str, kind: type, file_path: str, where: str = ""
) -> None:
    value = data.get(key)
    if value is not None and not isinstance(value, kind):
        label = f"{where}.{key}" if where else key
        raise ComponentLoadError(
            f"'{label}' must be a {'JSON object' if kind is dict else 'JSON array'}",
            file_path=file_path or None,
        )


def _check_nodes(nodes: Any, where: str, file_path: str) -> None:
    """Check container types only; node contents are not validated."""
    if nodes is None:
        return
    if not isinstance(nodes, list):
        raise ComponentLoadError(
            f"'{where}' must be a JSON array", file_path=file_path or None
        )

    for index, node in enumerate(nodes):
        path = f"{where}[{index}]"
        if not isinstance(node, dict):
            raise ComponentLoadError(
                f"'{path}' must be a JSON object", file_path=file_path or None
            )
        for key in ("properties", "bindings"):
            _check_container(node, key, dict, file_path, path)
        _check_nodes(node.get("children"), f"{path}.children", file_path)
