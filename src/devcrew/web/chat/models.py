"""Chat Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PhaseIn(BaseModel):
    name: str
    tasks: list[str] = []


class ChatRequest(BaseModel):
    message: str = Field(min_length=1)
    agent: str | None = None  # Category; routed from the message when omitted
    phases: list[PhaseIn] = []


class ChatResponse(BaseModel):
    agent: str
    title: str
    response: str


class RouteResponse(BaseModel):
    agent: str
    rule: str
    applicable: list[str]
