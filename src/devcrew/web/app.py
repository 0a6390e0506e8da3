"""FastAPI app factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..agents.factory import AgentFactory
from ..core.config import Config
from ..manager.agent import ManagerAgent
from ..services import AssistantServices
from .config import WebConfig

logger = logging.getLogger(__name__)


def create_app(
    services: AssistantServices | None = None,
    config: Config | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    One Manager instance lives for the lifetime of the app and owns the
    uploaded project state. Specialists are built per request.
    """
    web_config = WebConfig.load()
    config = config or Config.load()

    app = FastAPI(
        title="devcrew",
        description="Simulated team of specialised development agents for e-commerce projects",
        version="0.1.0",
        debug=web_config.debug,
    )

    factory = AgentFactory(services=services, config=config.coordination)
    app.state.factory = factory
    app.state.manager = ManagerAgent(
        services=factory.services,
        factory=factory,
        config=config.coordination,
        reports=config.reports,
    )

    # CORS
    origins = web_config.cors_origins or [
        "http://localhost",
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    from .chat.router import router as chat_router
    from .requirements.router import router as requirements_router

    app.include_router(chat_router)
    app.include_router(requirements_router)

    # Error handlers
    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    return app
