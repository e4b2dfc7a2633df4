"""Tests for keyword tables and whole-word matching."""

from __future__ import annotations

import dataclasses

import pytest

from latercap.domain.vocabulary import (
    ACTION_VERBS,
    CLOCK_TIME_PATTERN,
    DEFAULT_VOCABULARY,
    LIST_KEYWORDS,
    TIME_PHRASES,
    WEEKDAYS,
    Vocabulary,
    compile_terms,
)


class TestTables:
    def test_core_verbs_present(self) -> None:
        for verb in ("buy", "call", "send", "schedule", "fix", "review", "submit"):
            assert verb in ACTION_VERBS

    def test_weekdays_are_time_phrases(self) -> None:
        assert set(WEEKDAYS) <= TIME_PHRASES

    def test_tables_are_lowercase(self) -> None:
        for table in (ACTION_VERBS, TIME_PHRASES, LIST_KEYWORDS):
            assert all(term == term.lower() for term in table)


class TestCompileTerms:
    def test_whole_word_only(self) -> None:
        pattern = compile_terms(["do", "at"])
        assert pattern.search("do it") is not None
        assert pattern.search("document") is None
        assert pattern.search("that") is None

    def test_case_insensitive(self) -> None:
        assert compile_terms(["asap"]).search("Call ASAP") is not None

    def test_punctuation_is_a_boundary(self) -> None:
        assert compile_terms(["urgent"]).search("URGENT: review") is not None

    def test_hyphen_is_not_a_boundary(self) -> None:
        pattern = compile_terms(["list"])
        assert pattern.search("to-list") is None
        assert pattern.search("list-like") is None

    def test_hyphenated_term(self) -> None:
        assert compile_terms(["to-do"]).search("my to-do items") is not None

    def test_phrase_tolerates_whitespace(self) -> None:
        pattern = compile_terms(["next week"])
        assert pattern.search("call next   week") is not None
        assert pattern.search("call next\nweek") is not None

    def test_longest_term_wins(self) -> None:
        match = compile_terms(["next", "next week"]).search("next week")
        assert match is not None
        assert match.group(0) == "next week"

    def test_terms_are_escaped(self) -> None:
        pattern = compile_terms(["c++"])
        assert pattern.search("learn c++ today") is not None
        assert pattern.search("learn cxx") is None

    @pytest.mark.parametrize("terms", [[], ["", "  "]])
    def test_empty_never_matches(self, terms: list[str]) -> None:
        pattern = compile_terms(terms)
        assert pattern.search("") is None
        assert pattern.search("anything at all") is None


class TestClockTime:
    @pytest.mark.parametrize("text", ["at 5", "at 17:30", "5pm", "10:30 am", "Meet at 3PM"])
    def test_matches(self, text: str) -> None:
        assert CLOCK_TIME_PATTERN.search(text) is not None

    @pytest.mark.parametrize("text", ["at noon", "5 apples", "version 2", "that"])
    def test_no_match(self, text: str) -> None:
        assert CLOCK_TIME_PATTERN.search(text) is None


class TestVocabulary:
    def test_default_uses_builtin_tables(self) -> None:
        assert DEFAULT_VOCABULARY.action_verbs == ACTION_VERBS
        assert DEFAULT_VOCABULARY.list_keywords == LIST_KEYWORDS

    def test_is_action_verb_case_insensitive(self) -> None:
        assert DEFAULT_VOCABULARY.is_action_verb("Buy")
        assert DEFAULT_VOCABULARY.is_action_verb("CALL")
        assert not DEFAULT_VOCABULARY.is_action_verb("Meeting")
        assert not DEFAULT_VOCABULARY.is_action_verb("")

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_VOCABULARY.action_verbs = frozenset()  # type: ignore[misc]

    def test_extended_merges_and_normalises(self) -> None:
        vocab = DEFAULT_VOCABULARY.extended(
            action_verbs=["  Water ", ""],
            list_keywords=["Groceries"],
        )
        assert "water" in vocab.action_verbs
        assert "" not in vocab.action_verbs
        assert ACTION_VERBS <= vocab.action_verbs
        assert vocab.list_pattern.search("Groceries:") is not None

    def test_extended_returns_new_instance(self) -> None:
        vocab = DEFAULT_VOCABULARY.extended(priority_markers=["blocker"])
        assert vocab is not DEFAULT_VOCABULARY
        assert "blocker" not in DEFAULT_VOCABULARY.priority_markers
        assert vocab.priority_pattern.search("Blocker for release") is not None

    def test_equality_ignores_compiled_patterns(self) -> None:
        assert Vocabulary() == DEFAULT_VOCABULARY
