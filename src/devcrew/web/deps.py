"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from ..agents.factory import AgentFactory
from ..manager.agent import ManagerAgent


def _get_manager(request: Request) -> ManagerAgent:
    return request.app.state.manager


def _get_factory(request: Request) -> AgentFactory:
    return request.app.state.factory


# The app-wide Manager holds the uploaded project state
Manager = Annotated[ManagerAgent, Depends(_get_manager)]
Factory = Annotated[AgentFactory, Depends(_get_factory)]
