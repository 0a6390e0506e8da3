"""Tests for the canned offline collaborators."""

from __future__ import annotations

import pytest

from devcrew.services import OfflineServices


@pytest.fixture
def offline():
    return OfflineServices()


class TestOfflineServices:
    @pytest.mark.asyncio
    async def test_generate_by_keyword(self, offline):
        assert (await offline.generate("plan the checkout")).startswith("A checkout flow")
        assert (await offline.generate("Backend Developer needs guidance")).startswith(
            "Break the problem"
        )
        assert (await offline.generate("anything")).startswith("Here is an outline")

    @pytest.mark.asyncio
    async def test_check_security_uses_scan(self, offline):
        result = await offline.check_security("md5(value)")
        assert result == "- [high] Use of weak cryptographic algorithms detected."
        assert await offline.check_security("x = 1") == "No security findings."

    @pytest.mark.asyncio
    async def test_run_tests_counts_lines(self, offline):
        result = await offline.run_tests("a = 1\nb = 2", "unit")
        assert result.startswith("Ran unit checks over 2 line(s)")
