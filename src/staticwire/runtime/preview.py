"""Preview server: serves a component file compiled on every request."""

import logging
from pathlib import Path
from typing import Optional

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse
from starlette.routing import Route

from staticwire.compiler.codegen.generator import CompileOptions, component_to_html
from staticwire.compiler.exceptions import StaticWireError
from staticwire.compiler.loader import load_component
from staticwire.templating import render_template

log = logging.getLogger(__name__)


def render_error_page(exc: StaticWireError) -> HTMLResponse:
    """Render the error page shown when a component can't be loaded."""
    html_content = render_template(
        "error/compile.html",
        {
            "title": type(exc).__name__,
            "message": exc.message,
            "file_path": exc.file_path or "",
        },
    )
    return HTMLResponse(html_content, status_code=500)


def create_preview_app(
    component_path: Path, options: Optional[CompileOptions] = None
) -> Starlette:
    """Create an ASGI app serving the compiled component at /."""

    async def index(request: Request) -> HTMLResponse:
        try:
            component = load_component(component_path)
        except StaticWireError as e:
            log.error(f"Could not load {component_path}: {e.message}")
            return render_error_page(e)

        return HTMLResponse(component_to_html(component, options))

    return Starlette(routes=[Route("/", index)])


def run_preview_server(
    component_path: Path,
    host: str,
    port: int,
    options: Optional[CompileOptions] = None,
) -> None:
    """Serve the preview app with uvicorn until interrupted."""
    import uvicorn

    app = create_preview_app(component_path, options)
    uvicorn.run(app, host=host, port=port, log_config=None)
