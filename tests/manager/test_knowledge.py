"""Tests for knowledge base scoring and recommendations."""

from __future__ import annotations

import pytest

from devcrew.manager.knowledge import (
    KNOWLEDGE_BASE_PROMPT,
    KnowledgeResource,
    calculate_resource_relevance,
    categorize_resource,
    generate_knowledge_base_prompt,
    generate_resource_recommendations,
    search_knowledge_base,
)

STRIPE = KnowledgeResource(
    title="Stripe payments guide",
    url="https://stripe.com/guides",
    tags=("payments",),
)
SHOPIFY = KnowledgeResource(
    title="Shopify storefront",
    url="https://shopify.com",
    description="Hosted store with payments built in",
)
MISC = KnowledgeResource(title="Team handbook", url="https://example.com", category="payments")


class TestRelevance:
    def test_title_and_tag(self):
        assert calculate_resource_relevance(STRIPE, "payments") == pytest.approx(0.7)

    def test_description_only(self):
        assert calculate_resource_relevance(SHOPIFY, "payments") == pytest.approx(0.2)

    def test_capped_at_one(self):
        assert calculate_resource_relevance(STRIPE, "stripe payments guide") == 1.0

    def test_empty_query(self):
        assert calculate_resource_relevance(STRIPE, "") == 0.0


class TestSearch:
    def test_threshold_and_order(self):
        results = search_knowledge_base([MISC, SHOPIFY, STRIPE], "payments")
        # MISC scores 0.1 and SHOPIFY exactly 0.2, both at or below the threshold
        assert [r.title for r in results] == ["Stripe payments guide"]
        assert results[0].relevance_score == pytest.approx(0.7)
        # Input resources keep no score
        assert STRIPE.relevance_score is None

    def test_empty_inputs(self):
        assert search_knowledge_base([], "payments") == []
        assert search_knowledge_base([STRIPE], "") == []


class TestCategorize:
    @pytest.mark.parametrize(
        "resource, expected",
        [
            (KnowledgeResource("Stripe", "https://docs.stripe.com"), "technical"),
            (KnowledgeResource("React reference", "https://react.dev"), "technical"),
            (KnowledgeResource("Accessibility standard", "https://w3.org"), "standards"),
            (
                KnowledgeResource("Acme", "https://acme.com", description="A similar platform"),
                "competitors",
            ),
            (KnowledgeResource("OWASP security checklist", "https://owasp.org"), "security"),
            (KnowledgeResource("Team handbook", "https://example.com"), "other"),
        ],
    )
    def test_categories(self, resource, expected):
        assert categorize_resource(resource) == expected


class TestRecommendations:
    def test_matching_groups_in_order(self):
        recs = generate_resource_recommendations("checkout with secure payments")
        assert recs == [
            "E-commerce platform comparison",
            "Payment gateway documentation",
            "E-commerce UX best practices",
            "Web application security checklists",
            "OWASP top 10 vulnerabilities",
            "Data protection regulations",
        ]

    def test_nothing_relevant(self):
        assert generate_resource_recommendations("hello") == []

    def test_prompt(self):
        assert generate_knowledge_base_prompt() == KNOWLEDGE_BASE_PROMPT
        assert KNOWLEDGE_BASE_PROMPT.startswith("## Knowledge Base Enhancement")
