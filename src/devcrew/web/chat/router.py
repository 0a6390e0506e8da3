"""Chat routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from ...agents.classifier import determine_agent_type, explain_routing
from ...agents.models import AgentCategory, Phase
from ...agents.registry import AgentRegistry
from ..deps import Factory, Manager
from .models import ChatRequest, ChatResponse, RouteResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat(body: ChatRequest, manager: Manager, factory: Factory):
    if body.agent:
        category = AgentCategory.from_string(body.agent)
        if category is None:
            raise ValueError(f"Unknown agent: {body.agent}")
    else:
        category = determine_agent_type(body.message)

    phases = [Phase(name=p.name, tasks=tuple(p.tasks)) for p in body.phases]
    agent = manager if category is AgentCategory.MANAGER else factory.create(category)
    logger.info("Chat routed to %s", agent.name)

    reply = await agent.generate_response(body.message, phases)
    return ChatResponse(agent=category.value, title=agent.title, response=reply)


@router.get("/route", response_model=RouteResponse)
async def route(message: str):
    category = determine_agent_type(message)
    applicable = [p.category.value for p in AgentRegistry().list_for_message(message)]
    return RouteResponse(
        agent=category.value, rule=explain_routing(message), applicable=applicable
    )
