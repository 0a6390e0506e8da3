"""Core module for devcrew."""

from . import defaults
from .config import Config, CoordinationConfig, ReportConfig

__all__ = [
    "defaults",
    "Config",
    "CoordinationConfig",
    "ReportConfig",
]
