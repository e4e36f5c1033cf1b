from typing import Any, Dict

from jinja2 import Environment, PackageLoader, select_autoescape

# Shared environment for the runtime script and the preview error pages.
# Script templates (.js.j2) are not autoescaped: they splice source code.
_env = Environment(
    loader=PackageLoader("staticwire", "templates"),
    autoescape=select_autoescape(["html", "xml"]),
    keep_trailing_newline=True,
)


def render_template(template_name: str, context: Dict[str, Any]) -> str:
    """Render a Jinja2 template with the given context.

    Args:
        template_name: Name of the template relative to src/staticwire/templates/
        context: Dictionary of variables to pass to the template

    Returns:
        Rendered text
    """
    template = _env.get_template(template_name)
    return template.render(**context)
