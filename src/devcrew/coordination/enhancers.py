"""Enrichment steps applied to a confident draft answer.

Steps are evaluated in table order and the first applicable one runs.
Each step fetches extra material from the agent's services and appends it
to the draft under a fixed heading.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..agents.models import Phase
from . import detectors
from .prompts import create_code_search_query

if TYPE_CHECKING:
    from ..agents.base import BaseAgent

CODE_EXAMPLES_TEMPLATE = """\
{response}

## Implementation Examples

Here are some code examples that might help:

{results}

Would you like me to explain any specific part in more detail?"""

PACKAGE_INFO_TEMPLATE = """\
{response}

## Package Information

{results}

Let me know if you'd like to explore other packages or need help with implementation."""

TEST_RESULTS_TEMPLATE = """\
{response}

## Code Testing Results

{results}

Would you like me to help implement any of these suggestions?"""

TROUBLESHOOTING_TEMPLATE = """\
{response}

## Troubleshooting Guide

{results}

Let me know if you'd like more specific help resolving this issue."""

SECURITY_CHECK_TEMPLATE = """\
{response}

## Security Analysis

{results}

Security is particularly important for e-commerce platforms. Let me know if you'd like help implementing any of these recommendations."""

SEARCH_RESULTS_TEMPLATE = """\
{response}

## Additional Resources

Based on best practices and current industry standards:

{results}

Would you like me to elaborate on any specific aspect of these recommendations?"""


@dataclass(frozen=True)
class EnrichmentRequest:
    """Inputs shared by every enrichment step."""

    agent: BaseAgent
    message: str
    draft: str
    phases: tuple[Phase, ...] = ()


@dataclass(frozen=True)
class EnrichmentStep:
    """A (predicate, fetch, template) enrichment entry."""

    name: str
    applies: Callable[[EnrichmentRequest], bool]
    fetch: Callable[[EnrichmentRequest], Awaitable[str]]
    template: str


def _fetch_code_examples(req: EnrichmentRequest) -> Awaitable[str]:
    query = create_code_search_query(req.message, req.agent.category)
    return req.agent.services.search_code_examples(query)


def _fetch_package_info(req: EnrichmentRequest) -> Awaitable[str]:
    name = detectors.extract_package_name(req.message, req.agent.category)
    return req.agent.services.search_packages(name)


def _fetch_test_results(req: EnrichmentRequest) -> Awaitable[str]:
    code = detectors.extract_code_blocks(req.draft)
    return req.agent.services.run_tests(code, detectors.determine_test_type(req.message))


def _fetch_troubleshooting(req: EnrichmentRequest) -> Awaitable[str]:
    return req.agent.services.troubleshoot(detectors.extract_error_message(req.message))


def _fetch_security_check(req: EnrichmentRequest) -> Awaitable[str]:
    return req.agent.services.check_security(detectors.extract_code_blocks(req.draft))


def _fetch_search_results(req: EnrichmentRequest) -> Awaitable[str]:
    query = req.agent.create_search_query(req.message, req.phases)
    return req.agent.services.search_internet(query)


ENRICHMENT_STEPS: tuple[EnrichmentStep, ...] = (
    EnrichmentStep(
        "code-examples",
        lambda req: detectors.should_search_for_code_examples(req.message),
        _fetch_code_examples,
        CODE_EXAMPLES_TEMPLATE,
    ),
    EnrichmentStep(
        "package-info",
        lambda req: detectors.should_search_for_package_info(req.message),
        _fetch_package_info,
        PACKAGE_INFO_TEMPLATE,
    ),
    EnrichmentStep(
        "code-testing",
        lambda req: detectors.should_test_code(req.message, req.draft),
        _fetch_test_results,
        TEST_RESULTS_TEMPLATE,
    ),
    EnrichmentStep(
        "troubleshooting",
        lambda req: detectors.should_troubleshoot_code(req.message),
        _fetch_troubleshooting,
        TROUBLESHOOTING_TEMPLATE,
    ),
    EnrichmentStep(
        "security-check",
        # Agents may widen this trigger
        lambda req: req.agent.should_check_security(req.message, req.draft),
        _fetch_security_check,
        SECURITY_CHECK_TEMPLATE,
    ),
    EnrichmentStep(
        "best-practice-search",
        lambda req: detectors.should_search_for_additional_info(req.message),
        _fetch_search_results,
        SEARCH_RESULTS_TEMPLATE,
    ),
)


def select_enrichment(req: EnrichmentRequest) -> EnrichmentStep | None:
    """First applicable enrichment step, or None."""
    for step in ENRICHMENT_STEPS:
        if step.applies(req):
            return step
    return None


def apply_template(template: str, response: str, results: str) -> str:
    return template.format(response=response, results=results)
