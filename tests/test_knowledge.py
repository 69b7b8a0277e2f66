"""Tests for the offline FAQ knowledge base."""

import pytest

from fridai.services.knowledge import FaqEntry, FaqKnowledgeBase


class TestFaqKnowledgeBase:
    @pytest.mark.asyncio
    async def test_opening_hours(self):
        answers = await FaqKnowledgeBase().answer("What time do you open?")
        assert answers[0].text == "We open at 5pm"

    @pytest.mark.asyncio
    async def test_unknown_question_has_no_answers(self):
        assert await FaqKnowledgeBase().answer("Do you deliver to the moon?") == []

    @pytest.mark.asyncio
    async def test_answers_are_ranked_best_first(self):
        catalog = [
            FaqEntry(frozenset({"wine"}), "We have a wine list."),
            FaqEntry(frozenset({"wine", "red"}), "Our red wines come from Tuscany."),
        ]
        answers = await FaqKnowledgeBase(catalog, min_score=0.3).answer("Any red wine?")
        assert [a.text for a in answers] == [
            "Our red wines come from Tuscany.",
            "We have a wine list.",
        ]
        assert answers[0].score == pytest.approx(1.0)

    @pytest.mark.asyncio
    async def test_min_score_filters_weak_matches(self):
        catalog = [FaqEntry(frozenset({"wine", "red"}), "Our red wines come from Tuscany.")]
        answers = await FaqKnowledgeBase(catalog, min_score=0.9).answer("any wine?")
        assert answers == []
