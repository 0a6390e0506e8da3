"""External collaborator contracts and the offline implementation."""

from .base import AssistantServices, ServiceError
from .offline import OfflineServices

__all__ = [
    "AssistantServices",
    "OfflineServices",
    "ServiceError",
]
