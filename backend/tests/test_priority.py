"""
Tests for the model prioritizer.

Covers both regimes, the 4000-char boundary, the permutation invariant,
threshold overrides and conversation size accounting.
"""

import pytest
from google.genai import types

from gemini.config import MODEL_CATALOG
from gemini.priority import PRIORITY_TABLE, choose_model_order, count_conversation_chars


def _message(*texts, role="user") -> types.Content:
    return types.Content(role=role, parts=[types.Part(text=t) for t in texts])


# ── Regimes ───────────────────────────────────────────────────────────────


class TestRegimes:

    @pytest.mark.parametrize("total_chars", [0, 1, 2500, 4000])
    def test_short_conversation_leads_with_flash(self, total_chars):
        assert choose_model_order(total_chars)[0] == "gemini-2.5-flash"

    @pytest.mark.parametrize("total_chars", [4001, 10_000, 1_000_000])
    def test_long_conversation_leads_with_pro(self, total_chars):
        assert choose_model_order(total_chars)[0] == "gemini-2.5-pro"

    def test_long_order(self):
        assert choose_model_order(5000) == [
            "gemini-2.5-pro",
            "gemini-1.5-pro-latest",
            "gemini-2.5-flash",
            "gemini-1.5-flash-latest",
            "gemini-pro",
        ]

    def test_short_order(self):
        assert choose_model_order(100) == [
            "gemini-2.5-flash",
            "gemini-1.5-flash-latest",
            "gemini-2.5-pro",
            "gemini-1.5-pro-latest",
            "gemini-pro",
        ]

    def test_threshold_override(self):
        assert choose_model_order(150, threshold=100)[0] == "gemini-2.5-pro"
        assert choose_model_order(100, threshold=100)[0] == "gemini-2.5-flash"


# ── Invariants ────────────────────────────────────────────────────────────


class TestOrderInvariants:

    @pytest.mark.parametrize("total_chars", [0, 4000, 4001, 50_000])
    def test_order_is_permutation_of_catalog(self, total_chars):
        order = choose_model_order(total_chars)
        assert len(order) == len(MODEL_CATALOG)
        assert len(set(order)) == len(order)
        assert set(order) == set(MODEL_CATALOG)

    @pytest.mark.parametrize("total_chars", [0, 4000, 4001, 50_000])
    def test_oldest_model_always_last(self, total_chars):
        assert choose_model_order(total_chars)[-1] == MODEL_CATALOG[-1] == "gemini-pro"

    def test_table_entries_cover_catalog(self):
        for indices in PRIORITY_TABLE.values():
            assert sorted(indices) == list(range(len(MODEL_CATALOG)))

    def test_returns_fresh_list(self):
        first = choose_model_order(10)
        first.clear()
        assert len(choose_model_order(10)) == len(MODEL_CATALOG)


# ── Size accounting ───────────────────────────────────────────────────────


class TestCountConversationChars:

    def test_sums_all_parts_of_all_messages(self):
        messages = [
            _message("abc", "de"),
            _message("fghij", role="model"),
        ]
        assert count_conversation_chars(messages) == 10

    def test_non_text_parts_count_zero(self):
        image = types.Part(inline_data=types.Blob(mime_type="image/png", data=b"\x89PNG"))
        messages = [types.Content(role="user", parts=[image, types.Part(text="hi")])]
        assert count_conversation_chars(messages) == 2

    def test_message_without_parts(self):
        assert count_conversation_chars([types.Content(role="user")]) == 0

    def test_long_conversation_crosses_threshold(self):
        messages = [_message("x" * 2001), _message("y" * 2000, role="model")]
        total = count_conversation_chars(messages)
        assert total == 4001
        assert choose_model_order(total)[0] == "gemini-2.5-pro"
