"""CaptureService: the quick-capture flow around the classifier.

Pipeline for :meth:`CaptureService.capture`:
SCORE → DETECT → GATE (confidence vs. auto-apply threshold) → PREFILL → RESPOND

The classifier itself never fails; the only error results produced here
are for input the flow cannot use (empty capture, unknown type names).
"""

from __future__ import annotations

import logging
from datetime import date

from pydantic import BaseModel, Field

from latercap.domain.classifier import (
    Classification,
    confidence_from_signals,
    extract_due_date,
    extract_list_items,
    type_from_signals,
)
from latercap.domain.signals import score_signals
from latercap.domain.types import ContentType
from latercap.services._helpers import derive_title, today_local
from latercap.services.base import BaseService
from latercap.services.result import ServiceError, ServiceResult
from latercap.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class CaptureDraft(BaseModel):
    """An item ready to be saved by the app, built from raw capture text."""

    model_config = {"frozen": True}

    content_type: ContentType
    suggested_type: ContentType
    source: str = Field(description="'user', 'auto', or 'fallback'")
    title: str
    content: str
    confidence: float
    auto_applied: bool
    due_date: date | None = None
    items: list[str] = Field(default_factory=list)

    @property
    def needs_confirmation(self) -> bool:
        return self.source == "fallback"


def _error(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


class CaptureService(BaseService):
    """Classify free text and turn it into pre-filled capture drafts."""

    # ------------------------------------------------------------------
    # Engine pass-throughs
    # ------------------------------------------------------------------

    def classify(self, text: str) -> Classification:
        """Detect and score *text* with the configured vocabulary."""
        with trace_span("score_signals") as span:
            signals = score_signals(text, self._vocabulary)
            if span is not None:
                span.annotate("scores", signals.to_dict())
        detected = type_from_signals(signals)
        scores = {ct: round(confidence_from_signals(signals, ct), 4) for ct in ContentType}
        return Classification(content_type=detected, confidence=scores[detected], scores=scores)

    @traced
    def detect(self, text: str) -> ServiceResult:
        """Suggest a content type for *text*."""
        result = self.classify(text)
        logger.debug("Detected %s (%.2f)", result.content_type, result.confidence)
        return ServiceResult(
            ok=True,
            op="detect",
            data={
                "type": result.content_type.value,
                "confidence": result.confidence,
                "scores": {ct.value: score for ct, score in result.scores.items()},
            },
        )

    @traced
    def confidence(self, text: str, content_type: str | ContentType) -> ServiceResult:
        """Score *text* against one requested content type."""
        try:
            target = ContentType.parse(str(content_type))
        except ValueError as exc:
            return _error("confidence", "UNKNOWN_TYPE", str(exc), type=str(content_type))

        signals = score_signals(text, self._vocabulary)
        value = round(confidence_from_signals(signals, target), 4)
        return ServiceResult(
            ok=True,
            op="confidence",
            data={
                "type": target.value,
                "confidence": value,
                "detected": type_from_signals(signals).value,
            },
        )

    @traced
    def extract_items(self, text: str) -> ServiceResult:
        """Pull list items out of *text* (empty when it is not a list)."""
        items = extract_list_items(text, vocabulary=self._vocabulary)
        return ServiceResult(
            ok=True,
            op="extract_items",
            data={"items": items, "count": len(items)},
        )

    @traced
    def extract_due(self, text: str, *, today: date | None = None) -> ServiceResult:
        """Resolve a relative due-date phrase in *text*, if any."""
        due = extract_due_date(text, now=today or today_local())
        return ServiceResult(
            ok=True,
            op="extract_due",
            data={"due_date": due.isoformat() if due else None},
        )

    # ------------------------------------------------------------------
    # Quick capture
    # ------------------------------------------------------------------

    def build_draft(
        self,
        text: str,
        *,
        content_type: ContentType | None = None,
        today: date | None = None,
    ) -> CaptureDraft:
        """Build a :class:`CaptureDraft` for non-empty *text*.

        A type chosen by the user always wins.  Otherwise the detected
        type is applied only when its confidence reaches
        ``capture.auto_apply_threshold``; below it the draft stays a note
        and keeps the suggestion for the user to confirm.
        """
        cfg = self._settings.capture
        classification = self.classify(text)
        suggested = classification.content_type

        if content_type is not None:
            applied, source, auto = content_type, "user", False
        elif classification.confidence >= cfg.auto_apply_threshold:
            applied, source, auto = suggested, "auto", True
        else:
            applied, source, auto = ContentType.NOTE, "fallback", False

        due: date | None = None
        if applied is ContentType.TASK and cfg.prefill_due_date:
            due = extract_due_date(text, now=today or today_local())

        items: list[str] = []
        if applied is ContentType.LIST and cfg.prefill_items:
            with trace_span("extract_list_items") as span:
                items = extract_list_items(text, vocabulary=self._vocabulary)
                if span is not None:
                    span.annotate("count", len(items))

        return CaptureDraft(
            content_type=applied,
            suggested_type=suggested,
            source=source,
            title=derive_title(text, cfg.title_max_length),
            content=text.strip(),
            confidence=classification.confidence,
            auto_applied=auto,
            due_date=due,
            items=items,
        )

    @traced
    def capture(
        self,
        text: str,
        *,
        content_type: str | ContentType | None = None,
        today: date | None = None,
    ) -> ServiceResult:
        """Turn raw capture text into a pre-filled draft."""
        if not text.strip():
            return _error("capture", "EMPTY_INPUT", "Nothing to capture: text is empty")

        chosen: ContentType | None = None
        if content_type is not None:
            try:
                chosen = ContentType.parse(str(content_type))
            except ValueError as exc:
                return _error("capture", "UNKNOWN_TYPE", str(exc), type=str(content_type))

        draft = self.build_draft(text, content_type=chosen, today=today)

        warnings: list[str] = []
        if draft.needs_confirmation:
            warnings.append(
                f"Suggested type '{draft.suggested_type}' has low confidence "
                f"({draft.confidence:.2f}); saved as note until confirmed"
            )
        if chosen is ContentType.LIST and not draft.items:
            warnings.append("No list items found in text")

        logger.debug(
            "Captured %r as %s (source=%s)", draft.title, draft.content_type, draft.source
        )
        data = draft.model_dump(mode="json")
        data["needs_confirmation"] = draft.needs_confirmation
        return ServiceResult(ok=True, op="capture", data=data, warnings=warnings)
