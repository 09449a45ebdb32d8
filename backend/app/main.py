import logging
import sys
from typing import Optional
from fastapi import FastAPI
from backend.app.routes import docs, health
from backend.app.services.lookup import DocsLookup
from shared.config import Settings, settings as default_settings

logger = logging.getLogger("dev-docs-api")

def create_app(settings: Optional[Settings] = None, lookup: Optional[DocsLookup] = None) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title="dev-docs")
    app.state.settings = settings
    app.state.lookup = lookup or DocsLookup(settings, logger=logger)
    app.include_router(health.router)
    app.include_router(docs.router)
    return app

app = create_app()

def run() -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    logging.basicConfig(level=default_settings.log_level.upper(), stream=sys.stderr)
    logger.info(f"HTTP server starting on http://{default_settings.api_host}:{default_settings.api_port}")
    uvicorn.run(app, host=default_settings.api_host, port=default_settings.api_port)

if __name__ == "__main__":
    run()
