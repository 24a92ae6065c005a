"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from example_site.api.pages import render_home_page
from example_site.app_logging import configure_logging
from example_site.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def home(request: Request) -> HTMLResponse:
        """Render the home page."""
        state_container: AppContainer = request.app.state.container
        logger.debug("Rendering home page")
        return HTMLResponse(render_home_page(state_container.example_service))

    return app
