"""Web application configuration.

Binding host and port belong to the ASGI server that runs the app, not
to the app itself.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class WebConfig:
    """Configuration for the web application."""

    cors_origins: list[str] | None = None
    debug: bool = False

    @classmethod
    def load(cls) -> WebConfig:
        config = cls()
        config.debug = os.environ.get("DEVCREW_DEBUG", "").lower() in ("1", "true")
        origins = os.environ.get("DEVCREW_CORS_ORIGINS")
        if origins:
            config.cors_origins = [o.strip() for o in origins.split(",")]
        logger.debug("Web config: debug=%s cors_origins=%s", config.debug, config.cors_origins)
        return config
