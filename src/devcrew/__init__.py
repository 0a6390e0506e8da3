"""devcrew: a simulated team of specialised development agents.

devcrew routes messages to Frontend, Backend, Database, DevOps, UX,
E-commerce and Manager agents, detects cross-team dependencies in their
answers, escalates uncertain answers to the Development Manager, and lets
the Manager synthesise multi-agent replies into a coordinated plan.

Usage:
    # CLI
    $ devcrew route "add a checkout page"
    $ devcrew chat "design the product schema"
    $ devcrew tasks requirements.md

    # Python API
    from devcrew import AgentFactory, determine_agent_type

    factory = AgentFactory()
    agent = factory.create(determine_agent_type(message))
    reply = await agent.generate_response(message)
"""

try:
    from importlib.metadata import version as _get_version

    __version__ = _get_version("devcrew")
except Exception:
    __version__ = "0.0.0-dev"


# Lazy imports keep CLI startup fast
def __getattr__(name: str):
    """Lazy import for main classes."""
    if name == "AgentFactory":
        from .agents.factory import AgentFactory

        return AgentFactory
    if name == "AgentCategory":
        from .agents.models import AgentCategory

        return AgentCategory
    if name == "determine_agent_type":
        from .agents.classifier import determine_agent_type

        return determine_agent_type
    if name == "ManagerAgent":
        from .manager.agent import ManagerAgent

        return ManagerAgent
    if name == "Config":
        from .core.config import Config

        return Config
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "__version__",
    "AgentCategory",
    "AgentFactory",
    "Config",
    "ManagerAgent",
    "determine_agent_type",
]
