"""Content classifier: task / list / note detection for quick capture.

Public operations (all pure, total, and safe to call concurrently):

- :func:`detect_type`: the most likely :class:`ContentType`.
- :func:`get_confidence`: how strongly the text supports one given type.
- :func:`extract_due_date`: a date from relative phrases ("tomorrow").
- :func:`extract_list_items`: cleaned list items in original order.
- :func:`classify`: detection plus all three confidences in one pass.

Precedence when signals conflict:

1. Empty, whitespace-only, or single-word text is a note.
2. Explicit list structure (two or more bulleted or numbered lines, or a
   list header followed by more lines) is a list, even when the text
   also starts with an action verb.
3. Otherwise the weighted scores decide: list wins only when it beats
   both others; task beats note; ties go to note.

INVARIANT: no operation raises for any ``str`` input.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from latercap.domain.dates import extract_due_date
from latercap.domain.lists import extract_list_items
from latercap.domain.signals import SignalScores, score_signals
from latercap.domain.types import ContentType
from latercap.domain.vocabulary import DEFAULT_VOCABULARY, Vocabulary

__all__ = [
    "Classification",
    "classify",
    "confidence_from_signals",
    "detect_type",
    "extract_due_date",
    "extract_list_items",
    "get_confidence",
    "type_from_signals",
]

EMPTY_NOTE_CONFIDENCE = 0.5
WEAK_SIGNAL_THRESHOLD = 2.0
WEAK_SIGNAL_MULTIPLIER = 0.6
EXPLICIT_SIGNAL_FLOOR = 0.75
CONTRADICTED_CEILING = 0.45


class Classification(BaseModel):
    """Detected type plus independent per-type confidences."""

    model_config = {"frozen": True}

    content_type: ContentType
    confidence: float = Field(ge=0.0, le=1.0)
    scores: dict[ContentType, float] = Field(default_factory=dict)

    def confidence_for(self, content_type: ContentType) -> float:
        return self.scores.get(content_type, 0.0)


# ---------------------------------------------------------------------------
# Decisions over precomputed signals
# ---------------------------------------------------------------------------


def type_from_signals(signals: SignalScores) -> ContentType:
    """Pick the winning category for already-scored text."""
    if signals.word_count <= 1:
        return ContentType.NOTE

    if signals.has_list_structure or signals.has_list_header:
        return ContentType.LIST

    task, list_, note = signals.task_score, signals.list_score, signals.note_score
    if list_ > task and list_ > note:
        return ContentType.LIST
    if task > note:
        return ContentType.TASK
    return ContentType.NOTE


def _is_explicit(signals: SignalScores, content_type: ContentType) -> bool:
    """True when *content_type* is backed by an unambiguous cue."""
    if content_type is ContentType.LIST:
        return signals.has_list_structure or signals.has_list_header
    if content_type is ContentType.TASK:
        return (
            signals.has_checkbox
            or signals.starts_with_action_verb
            or (signals.is_short_single_line and signals.has_task_signal)
        )
    return signals.sentence_marks >= 2 or signals.has_paragraphs


def confidence_from_signals(signals: SignalScores, content_type: ContentType) -> float:
    """Confidence in [0, 1] that already-scored text is *content_type*.

    The base value is the type's share of the total score, dampened when
    even the strongest score is weak.  Two adjustments keep the result
    consistent with :func:`type_from_signals`: an explicitly signalled
    winner never drops below :data:`EXPLICIT_SIGNAL_FLOOR`, and a type
    contradicted by explicit list structure (or by single-word input)
    never rises above :data:`CONTRADICTED_CEILING`.
    """
    if signals.word_count == 0:
        return EMPTY_NOTE_CONFIDENCE if content_type is ContentType.NOTE else 0.0

    total = signals.total_score
    if total <= 0:
        return 0.0

    confidence = signals.score_for(content_type) / total
    if signals.strongest_score < WEAK_SIGNAL_THRESHOLD:
        confidence *= WEAK_SIGNAL_MULTIPLIER

    detected = type_from_signals(signals)
    if content_type is detected and _is_explicit(signals, content_type):
        confidence = max(confidence, EXPLICIT_SIGNAL_FLOOR)

    contradicted = content_type is not detected and (
        signals.word_count <= 1
        or (signals.has_list_structure and content_type is not ContentType.LIST)
    )
    if contradicted:
        confidence = min(confidence, CONTRADICTED_CEILING)

    return min(max(confidence, 0.0), 1.0)


# ---------------------------------------------------------------------------
# Public operations
# ---------------------------------------------------------------------------


def detect_type(text: str, *, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> ContentType:
    """Return the most likely content type for *text*.

    Falls back to :attr:`ContentType.NOTE` for empty or ambiguous input.
    """
    return type_from_signals(score_signals(text, vocabulary))


def get_confidence(
    text: str,
    content_type: ContentType,
    *,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> float:
    """Return how strongly *text* supports *content_type*, in [0.0, 1.0].

    Each type is scored independently; the three values are not a
    probability distribution and need not sum to one.
    """
    return confidence_from_signals(score_signals(text, vocabulary), content_type)


def classify(text: str, *, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Classification:
    """Detect the type of *text* and score every type in a single scan."""
    signals = score_signals(text, vocabulary)
    detected = type_from_signals(signals)
    scores = {ct: round(confidence_from_signals(signals, ct), 4) for ct in ContentType}
    return Classification(content_type=detected, confidence=scores[detected], scores=scores)
