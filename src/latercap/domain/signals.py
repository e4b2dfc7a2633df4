"""Signal detection and weighted scoring.

A *signal* is a structural or lexical cue (a marker, a keyword, a shape)
that supports one category.  :func:`score_signals` finds every cue in one
pass and returns a frozen :class:`SignalScores`; the classifier turns those
scores into a category and per-category confidences.

Line structure recognised here:

- bullets: ``-``, ``*`` or ``•`` followed by whitespace
- numbered: ``1.`` or ``1)`` followed by whitespace
- checkboxes: ``[ ]``, ``[x]`` or ``[]``
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from latercap.domain.types import ContentType
from latercap.domain.vocabulary import CLOCK_TIME_PATTERN, DEFAULT_VOCABULARY, Vocabulary

BULLET_PATTERN = re.compile(r"^\s*[-*•]\s+")
NUMBERED_PATTERN = re.compile(r"^\s*\d{1,3}[.)]\s+")
CHECKBOX_PATTERN = re.compile(r"^\s*\[[ xX]?\]\s*")
_PARAGRAPH_PATTERN = re.compile(r"\n[ \t]*\n")
_SENTENCE_MARKS = re.compile(r"[.!?]")
_WORD_EDGES = re.compile(r"^\W+|\W+$")

# --- Weights ---

CHECKBOX_SCORE = 3.0
ACTION_VERB_START_SCORE = 2.5
ACTION_VERB_SCORE = 0.5
TIME_PHRASE_SCORE = 1.0
PRIORITY_SCORE = 1.5
SHORT_TASK_BONUS = 1.0

MARKED_LIST_BASE_SCORE = 4.0
MARKED_LIST_ITEM_SCORE = 0.5
LIST_KEYWORD_SCORE = 1.5
SIMPLE_LIST_SCORE = 2.0

LONG_TEXT_SCORE = 2.0
MULTI_SENTENCE_SCORE = 1.5
PARAGRAPH_SCORE = 1.5
NARRATIVE_SCORE = 1.0
NOTE_BASELINE_SCORE = 1.0

# --- Thresholds ---

TASK_LENGTH_THRESHOLD = 100
SHORT_LINE_THRESHOLD = 50
NARRATIVE_WORD_THRESHOLD = 20
MIN_MARKED_LINES = 2
MIN_SIMPLE_LIST_LINES = 3


def normalize_newlines(text: str) -> str:
    """Fold ``\\r\\n`` and bare ``\\r`` line endings into ``\\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def strip_marker(line: str) -> tuple[str, bool]:
    """Strip one leading bullet, number, or checkbox marker from *line*.

    Returns ``(item_text, had_marker)``.  The item text is trimmed.
    """
    for pattern in (CHECKBOX_PATTERN, BULLET_PATTERN, NUMBERED_PATTERN):
        match = pattern.match(line)
        if match:
            rest = line[match.end() :]
            # "- [ ] milk" carries both a bullet and a checkbox.
            box = CHECKBOX_PATTERN.match(rest)
            if box:
                rest = rest[box.end() :]
            return rest.strip(), True
    return line.strip(), False


def is_list_header(line: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> bool:
    """True when *line* announces a list: a list keyword and a trailing colon."""
    stripped = line.strip()
    return stripped.endswith(":") and vocabulary.list_pattern.search(stripped) is not None


@dataclass(frozen=True)
class SignalScores:
    """Every cue found in one text, plus the weighted score per category."""

    char_count: int = 0
    word_count: int = 0
    line_count: int = 0
    has_checkbox: bool = False
    starts_with_action_verb: bool = False
    has_action_verb: bool = False
    has_time_phrase: bool = False
    has_priority_marker: bool = False
    bullet_lines: int = 0
    numbered_lines: int = 0
    has_list_keyword: bool = False
    has_list_header: bool = False
    has_simple_list_shape: bool = False
    sentence_marks: int = 0
    has_paragraphs: bool = False

    # --- Derived signals ---

    @property
    def has_list_structure(self) -> bool:
        """Explicit bulleted or numbered structure."""
        return self.bullet_lines >= MIN_MARKED_LINES or self.numbered_lines >= MIN_MARKED_LINES

    @property
    def has_task_signal(self) -> bool:
        return (
            self.has_checkbox
            or self.starts_with_action_verb
            or self.has_time_phrase
            or self.has_priority_marker
        )

    @property
    def is_short_single_line(self) -> bool:
        return self.char_count < TASK_LENGTH_THRESHOLD and self.line_count <= 1

    # --- Weighted scores ---

    @property
    def task_score(self) -> float:
        score = 0.0
        if self.has_checkbox:
            score += CHECKBOX_SCORE
        if self.starts_with_action_verb:
            score += ACTION_VERB_START_SCORE
        if self.has_action_verb:
            score += ACTION_VERB_SCORE
        if self.has_time_phrase:
            score += TIME_PHRASE_SCORE
        if self.has_priority_marker:
            score += PRIORITY_SCORE
        if self.is_short_single_line and self.has_task_signal:
            score += SHORT_TASK_BONUS
        return score

    @property
    def list_score(self) -> float:
        score = 0.0
        for marked in (self.bullet_lines, self.numbered_lines):
            if marked >= MIN_MARKED_LINES:
                score += MARKED_LIST_BASE_SCORE + marked * MARKED_LIST_ITEM_SCORE
        if self.has_list_keyword:
            score += LIST_KEYWORD_SCORE
        if self.has_simple_list_shape:
            score += SIMPLE_LIST_SCORE
        return score

    @property
    def note_score(self) -> float:
        score = NOTE_BASELINE_SCORE
        if self.char_count > TASK_LENGTH_THRESHOLD:
            score += LONG_TEXT_SCORE
        if self.sentence_marks >= 2:
            score += MULTI_SENTENCE_SCORE
        if self.has_paragraphs:
            score += PARAGRAPH_SCORE
        if self.word_count > NARRATIVE_WORD_THRESHOLD:
            score += NARRATIVE_SCORE
        return score

    def score_for(self, content_type: ContentType) -> float:
        if content_type is ContentType.TASK:
            return self.task_score
        if content_type is ContentType.LIST:
            return self.list_score
        return self.note_score

    @property
    def total_score(self) -> float:
        return self.task_score + self.list_score + self.note_score

    @property
    def strongest_score(self) -> float:
        return max(self.task_score, self.list_score, self.note_score)

    def to_dict(self) -> dict[str, float]:
        return {
            ContentType.TASK.value: self.task_score,
            ContentType.LIST.value: self.list_score,
            ContentType.NOTE.value: self.note_score,
        }


def score_signals(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> SignalScores:
    """Scan *text* once and collect every task, list, and note cue."""
    normalized = normalize_newlines(text)
    stripped = normalized.strip()
    if not stripped:
        return SignalScores()

    lines = [line for line in stripped.split("\n") if line.strip()]
    words = stripped.split()

    first_word = _WORD_EDGES.sub("", words[0]) if words else ""
    if any(p.match(lines[0]) for p in (CHECKBOX_PATTERN, BULLET_PATTERN, NUMBERED_PATTERN)):
        # "[ ] Call mom" / "- Call mom" / "1. Call mom": the verb follows the marker.
        item, _ = strip_marker(lines[0])
        item_words = item.split()
        first_word = _WORD_EDGES.sub("", item_words[0]) if item_words else ""

    simple_shape = len(lines) >= MIN_SIMPLE_LIST_LINES and all(
        len(line.strip()) < SHORT_LINE_THRESHOLD and not line.rstrip().endswith((".", "!", "?"))
        for line in lines
    )

    return SignalScores(
        char_count=len(stripped),
        word_count=len(words),
        line_count=len(lines),
        has_checkbox=any(CHECKBOX_PATTERN.match(line) for line in lines),
        starts_with_action_verb=vocabulary.is_action_verb(first_word),
        has_action_verb=vocabulary.action_pattern.search(stripped) is not None,
        has_time_phrase=(
            vocabulary.time_pattern.search(stripped) is not None
            or CLOCK_TIME_PATTERN.search(stripped) is not None
        ),
        has_priority_marker=vocabulary.priority_pattern.search(stripped) is not None,
        bullet_lines=sum(1 for line in lines if _marked_item(BULLET_PATTERN, line)),
        numbered_lines=sum(1 for line in lines if _marked_item(NUMBERED_PATTERN, line)),
        has_list_keyword=vocabulary.list_pattern.search(stripped) is not None,
        has_list_header=len(lines) >= 2 and is_list_header(lines[0], vocabulary),
        has_simple_list_shape=simple_shape,
        sentence_marks=len(_SENTENCE_MARKS.findall(stripped)),
        has_paragraphs=_PARAGRAPH_PATTERN.search(stripped) is not None,
    )


def _marked_item(pattern: re.Pattern[str], line: str) -> bool:
    """True when *line* carries *pattern*'s marker followed by some text."""
    match = pattern.match(line)
    return match is not None and bool(line[match.end() :].strip())
