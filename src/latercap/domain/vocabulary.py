"""Keyword tables driving the classifier.

Every table is a ``frozenset`` and every :class:`Vocabulary` is frozen, so
the tables can be shared across threads without locking.  Callers that want
extra words build a new instance with :meth:`Vocabulary.extended` instead of
touching the defaults.

Matching is whole-word and case-insensitive: ``"at"`` never fires inside
``"that"`` and ``"do"`` never fires inside ``"document"``.  Multi-word
phrases tolerate any run of whitespace between words.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

ACTION_VERBS: frozenset[str] = frozenset(
    {
        "buy",
        "call",
        "send",
        "schedule",
        "book",
        "email",
        "write",
        "read",
        "complete",
        "finish",
        "start",
        "create",
        "update",
        "delete",
        "fix",
        "get",
        "make",
        "do",
        "plan",
        "prepare",
        "review",
        "check",
        "verify",
        "test",
        "submit",
        "contact",
        "meet",
        "discuss",
        "confirm",
        "cancel",
        "reschedule",
        "pay",
        "pick",
        "return",
        "renew",
        "clean",
    }
)

WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

TIME_PHRASES: frozenset[str] = frozenset(
    {
        "today",
        "tonight",
        "tomorrow",
        "next week",
        "next month",
        "this week",
        "this weekend",
        "end of day",
        "eod",
        "noon",
        *WEEKDAYS,
    }
)

PRIORITY_MARKERS: frozenset[str] = frozenset(
    {
        "urgent",
        "important",
        "asap",
        "critical",
        "high priority",
    }
)

LIST_KEYWORDS: frozenset[str] = frozenset(
    {
        "list",
        "items",
        "things to",
        "todo",
        "to-do",
        "checklist",
    }
)

# "at 5", "at 17:30", "5pm", "10:30 am"
CLOCK_TIME_PATTERN = re.compile(
    r"\b(?:at\s+\d{1,2}(?::\d{2})?(?:\s*[ap]m)?|\d{1,2}(?::\d{2})?\s*[ap]m)\b",
    re.IGNORECASE,
)


def compile_terms(terms: Iterable[str]) -> re.Pattern[str]:
    """Compile *terms* into one whole-word, case-insensitive alternation.

    Longer terms are tried first so ``"next week"`` wins over ``"next"``.
    An empty table compiles to a pattern that never matches.
    """
    cleaned = sorted({t.strip().lower() for t in terms if t.strip()}, key=len, reverse=True)
    if not cleaned:
        return re.compile(r"(?!x)x")
    alternation = "|".join(re.escape(term).replace(r"\ ", r"\s+") for term in cleaned)
    return re.compile(rf"(?<![\w-])(?:{alternation})(?![\w-])", re.IGNORECASE)


@dataclass(frozen=True)
class Vocabulary:
    """Immutable bundle of keyword tables plus their compiled matchers."""

    action_verbs: frozenset[str] = ACTION_VERBS
    time_phrases: frozenset[str] = TIME_PHRASES
    priority_markers: frozenset[str] = PRIORITY_MARKERS
    list_keywords: frozenset[str] = LIST_KEYWORDS

    action_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)
    time_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)
    priority_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)
    list_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "action_pattern", compile_terms(self.action_verbs))
        object.__setattr__(self, "time_pattern", compile_terms(self.time_phrases))
        object.__setattr__(self, "priority_pattern", compile_terms(self.priority_markers))
        object.__setattr__(self, "list_pattern", compile_terms(self.list_keywords))

    def is_action_verb(self, word: str) -> bool:
        return word.lower() in self.action_verbs

    def extended(
        self,
        *,
        action_verbs: Iterable[str] = (),
        time_phrases: Iterable[str] = (),
        priority_markers: Iterable[str] = (),
        list_keywords: Iterable[str] = (),
    ) -> Vocabulary:
        """Return a new vocabulary with the extra terms merged in."""

        def _merge(base: frozenset[str], extra: Iterable[str]) -> frozenset[str]:
            return base | {t.strip().lower() for t in extra if t.strip()}

        return Vocabulary(
            action_verbs=_merge(self.action_verbs, action_verbs),
            time_phrases=_merge(self.time_phrases, time_phrases),
            priority_markers=_merge(self.priority_markers, priority_markers),
            list_keywords=_merge(self.list_keywords, list_keywords),
        )


DEFAULT_VOCABULARY = Vocabulary()
