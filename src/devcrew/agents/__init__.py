"""Agent system - message routing, agent profiles and the agent roles."""

from .base import APOLOGY_MESSAGE, BaseAgent
from .classifier import (
    ROUTING_RULES,
    TASK_RULES,
    can_handle,
    categorize_task,
    determine_agent_type,
    explain_routing,
)
from .factory import AgentFactory, create_agent
from .models import AgentCategory, AgentProfile, ConversationContext, DependencyInfo, Phase
from .registry import BUILTIN_PROFILES, AgentRegistry, get_profile

__all__ = [
    "APOLOGY_MESSAGE",
    "AgentCategory",
    "AgentFactory",
    "AgentProfile",
    "AgentRegistry",
    "BUILTIN_PROFILES",
    "BaseAgent",
    "ConversationContext",
    "DependencyInfo",
    "Phase",
    "ROUTING_RULES",
    "TASK_RULES",
    "can_handle",
    "categorize_task",
    "create_agent",
    "determine_agent_type",
    "explain_routing",
    "get_profile",
]
