"""Reactive runtime script generation."""

from staticwire.compiler.context import CompilationContext
from staticwire.core.nodes import UID_ATTRIBUTE, Component
from staticwire.helpers.state import get_state_object_string
from staticwire.templating import render_template


class ScriptCodegen:
    """Builds the inline script tying state writes to registered update code.

    The script is self-contained: it declares the raw state, the proxy that
    notifies observers, one onChange observer that re-applies every node's
    update code, an initial runObservers() call and the event handlers.
    """

    TEMPLATE = "runtime.js.j2"

    def generate(self, component: Component, ctx: CompilationContext) -> str:
        return render_template(
            self.TEMPLATE,
            {
                "state_object": get_state_object_string(component),
                "update_blocks": list(ctx.update_blocks()),
                "uid_attribute": UID_ATTRIBUTE,
                "js": ctx.js,
            },
        )
