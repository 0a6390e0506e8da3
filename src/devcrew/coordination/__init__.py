"""Coordination - dependency detection, escalation and enrichment."""

from .coordinator import COORDINATION_FALLBACK_DRAFT, Coordinator
from .detectors import (
    ESCALATION_MARKERS,
    IMPLICIT_DEPENDENCY_RULES,
    detect_dependencies,
    is_agent_stuck,
)
from .enhancers import ENRICHMENT_STEPS, EnrichmentStep

__all__ = [
    "COORDINATION_FALLBACK_DRAFT",
    "Coordinator",
    "ENRICHMENT_STEPS",
    "ESCALATION_MARKERS",
    "EnrichmentStep",
    "IMPLICIT_DEPENDENCY_RULES",
    "detect_dependencies",
    "is_agent_stuck",
]
