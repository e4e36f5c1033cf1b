"""Main component compiler."""

import logging
from dataclasses import dataclass
from typing import Optional

from staticwire.compiler.codegen.script import ScriptCodegen
from staticwire.compiler.codegen.template import TemplateCodegen
from staticwire.compiler.context import CompilationContext
from staticwire.compiler.ids import IdAllocator
from staticwire.core.nodes import Component
from staticwire.helpers.clone import fast_clone
from staticwire.helpers.formatting import format_html
from staticwire.helpers.styles import collect_css

log = logging.getLogger(__name__)


@dataclass
class CompileOptions:
    """Options for component_to_html.

    format: run the cosmetic formatting pass over the final document.
    deterministic_ids: number element identifiers instead of randomizing
        them, so repeated compilations produce identical output.
    """

    format: bool = True
    deterministic_ids: bool = False


class HtmlGenerator:
    """Compiles a Component into one self-contained HTML document."""

    def __init__(self, options: Optional[CompileOptions] = None) -> None:
        self.options = options or CompileOptions()
        self.template_codegen = TemplateCodegen()
        self.script_codegen = ScriptCodegen()

    def generate(self, component: Component) -> str:
        ctx = CompilationContext(
            ids=IdAllocator(deterministic=self.options.deterministic_ids)
        )
        tree = fast_clone(component)

        has_state = bool(tree.state)

        # Runs before markup: it rewrites css bindings into class properties
        css = collect_css(tree)
        html = self.template_codegen.compile_nodes(tree.children, ctx)

        if css.strip():
            html += f"<style>{css}</style>"

        if has_state:
            html += self.script_codegen.generate(tree, ctx)

        log.debug(
            f"Compiled component {tree.name or '<anonymous>'}: "
            f"{len(ctx.on_change_js_by_id)} bound elements, state={has_state}"
        )

        if self.options.format:
            html = self._format(html)
        return html

    def _format(self, html: str) -> str:
        try:
            return format_html(html)
        except Exception as e:
            log.warning(f"Could not format output: {e!r}\n{html}")
            return html


def component_to_html(
    component: Component, options: Optional[CompileOptions] = None
) -> str:
    """Compile a component to HTML markup with inline style and script."""
    return HtmlGenerator(options).generate(component)
