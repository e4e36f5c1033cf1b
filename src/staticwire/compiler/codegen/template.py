"""Markup generation for component nodes."""

from enum import Enum
from typing import Dict, List

from staticwire.compiler.context import CompilationContext
from staticwire.core.nodes import (
    CSS_KEY,
    FOR,
    FOR_EACH_KEY,
    FOR_NAME_KEY,
    FRAGMENT,
    REF_KEY,
    SHOW,
    SHOW_WHEN_KEY,
    SPREAD_KEY,
    TEXT_KEY,
    UID_ATTRIBUTE,
    Node,
)
from staticwire.helpers.case import camel_case
from staticwire.helpers.components import is_component


class NodeKind(Enum):
    FRAGMENT = "fragment"
    STATIC_TEXT = "static_text"
    DYNAMIC_TEXT = "dynamic_text"
    FOR = "for"
    SHOW = "show"
    ELEMENT = "element"


def classify_node(node: Node) -> NodeKind:
    """Return the single kind a node compiles as, in precedence order."""
    if node.name == FRAGMENT:
        return NodeKind.FRAGMENT
    if node.properties.get(TEXT_KEY):
        return NodeKind.STATIC_TEXT
    if node.bindings.get(TEXT_KEY):
        return NodeKind.DYNAMIC_TEXT
    if node.name == FOR:
        return NodeKind.FOR
    if node.name == SHOW:
        return NodeKind.SHOW
    return NodeKind.ELEMENT


class TemplateCodegen:
    """Compiles nodes to markup, registering update code on the context."""

    # HTML void elements that don't have closing tags
    VOID_ELEMENTS = {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }

    # Bindings that never become update code on a generic element
    # (spread is not supported yet; css is consumed by style collection)
    SKIPPED_BINDINGS = {SPREAD_KEY, REF_KEY, CSS_KEY}

    def compile(self, node: Node, ctx: CompilationContext) -> str:
        """Return the markup for node and its subtree.

        The node is not mutated. Nodes with at least one binding get exactly
        one identifier, emitted as the data-uid attribute.
        """
        el_id = ctx.ids.allocate(node) if node.bindings else ""
        kind = classify_node(node)

        if kind is NodeKind.FRAGMENT:
            return self._compile_children(node, ctx)
        if kind is NodeKind.STATIC_TEXT:
            return node.properties[TEXT_KEY]
        if kind is NodeKind.DYNAMIC_TEXT:
            return self._compile_dynamic_text(node, el_id, ctx)
        if kind is NodeKind.FOR:
            return self._compile_for(node, ctx)
        if kind is NodeKind.SHOW:
            return self._compile_show(node, el_id, ctx)
        return self._compile_element(node, el_id, ctx)

    def compile_nodes(self, nodes: List[Node], ctx: CompilationContext) -> str:
        return "\n".join(self.compile(child, ctx) for child in nodes)

    def _compile_children(self, node: Node, ctx: CompilationContext) -> str:
        return self.compile_nodes(node.children, ctx)

    def _compile_dynamic_text(
        self, node: Node, el_id: str, ctx: CompilationContext
    ) -> str:
        ctx.add_on_change_js(el_id, f"el.innerText = {node.bindings[TEXT_KEY]};\n")
        return f'<span {UID_ATTRIBUTE}="{el_id}"></span>'

    def _compile_for(self, node: Node, ctx: CompilationContext) -> str:
        # Rendering the loop body is left to whoever consumes the template
        loop = f"{node.bindings.get(FOR_NAME_KEY, '')} in {node.bindings.get(FOR_EACH_KEY, '')}"
        return (
            f'<template data-for="{loop}">'
            f"{self._compile_children(node, ctx)}"
            "</template>"
        )

    def _compile_show(self, node: Node, el_id: str, ctx: CompilationContext) -> str:
        condition = node.bindings.get(SHOW_WHEN_KEY, "")
        ctx.add_on_change_js(
            el_id, f"el.style.display = {condition} ? 'inline' : 'none';\n"
        )
        return (
            f'<span {UID_ATTRIBUTE}="{el_id}">'
            f"{self._compile_children(node, ctx)}"
            "</span>"
        )

    def _compile_element(self, node: Node, el_id: str, ctx: CompilationContext) -> str:
        attributes: Dict[str, str] = dict(node.properties)
        if el_id:
            attributes[UID_ATTRIBUTE] = el_id

        html = f"<{node.name}"
        for key, value in attributes.items():
            html += f' {key}="{value}"'

        for key, expr in node.bindings.items():
            if key in self.SKIPPED_BINDINGS:
                continue
            if key.startswith("on"):
                self._add_event_binding(node, el_id, key, expr, ctx)
            else:
                self._add_property_binding(el_id, key, expr, ctx)

        if node.name in self.VOID_ELEMENTS:
            return html + " />"

        return f"{html}>{self._compile_children(node, ctx)}</{node.name}>"

    def _add_event_binding(
        self, node: Node, el_id: str, key: str, expr: str, ctx: CompilationContext
    ) -> None:
        event = key[len("on") :].lower()
        # Native change fires on blur; framework change means every edit
        if event == "change" and not is_component(node):
            event = "input"

        fn_name = self.event_handler_name(el_id, event)
        ctx.add_js(f"\nfunction {fn_name}(event) {{\n  {expr}\n}}\n")
        ctx.add_on_change_js(
            el_id,
            f"el.removeEventListener('{event}', {fn_name});\n"
            f"el.addEventListener('{event}', {fn_name});\n",
        )

    def _add_property_binding(
        self, el_id: str, key: str, expr: str, ctx: CompilationContext
    ) -> None:
        if "-" in key:
            ctx.add_on_change_js(el_id, f'el.setAttribute("{key}", {expr});\n')
        else:
            ctx.add_on_change_js(el_id, f"el.{key} = {expr};\n")

    @staticmethod
    def event_handler_name(el_id: str, event: str) -> str:
        return camel_case(f"on-{el_id}-{event}")
