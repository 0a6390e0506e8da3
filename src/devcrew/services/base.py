"""Contracts for the external collaborators agents depend on."""

from __future__ import annotations

from typing import Protocol


class ServiceError(Exception):
    """Raised when an external collaborator call fails."""

    def __init__(self, message: str, service: str = ""):
        self.message = message
        self.service = service
        super().__init__(message)


class AssistantServices(Protocol):
    """Text generation and enrichment services.

    Every method may raise. Agents bound each call with a timeout and
    never retry.
    """

    async def generate(self, prompt: str) -> str:
        """Free-text completion for a prompt."""
        ...

    async def search_code_examples(self, query: str) -> str:
        ...

    async def search_packages(self, name: str) -> str:
        ...

    async def search_internet(self, query: str) -> str:
        ...

    async def run_tests(self, code: str, kind: str) -> str:
        ...

    async def troubleshoot(self, error_text: str) -> str:
        ...

    async def check_security(self, code: str) -> str:
        ...
