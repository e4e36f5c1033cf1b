from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("staticwire")
except PackageNotFoundError:
    __version__ = "unknown"

from staticwire.compiler.codegen.generator import CompileOptions, component_to_html
from staticwire.compiler.exceptions import ComponentLoadError, StaticWireError
from staticwire.compiler.loader import load_component, parse_component
from staticwire.core.nodes import Component, Node

__all__ = [
    "Component",
    "Node",
    "CompileOptions",
    "component_to_html",
    "load_component",
    "parse_component",
    "StaticWireError",
    "ComponentLoadError",
]
