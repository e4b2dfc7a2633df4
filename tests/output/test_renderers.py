"""Tests for operation-specific Rich renderers."""

from latercap.output.renderers import render_quiet, render_result
from latercap.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── Errors ────────────────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("capture", "EMPTY_INPUT", "Nothing to capture"))
        assert "ERROR" in output
        assert "capture" in output
        assert "Nothing to capture" in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("confidence", "UNKNOWN_TYPE", "Unknown content type", type="memo")
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "type: memo" in output

    def test_detail_hidden_without_verbose(self) -> None:
        result = _err("confidence", "UNKNOWN_TYPE", "Unknown content type", type="memo")
        assert "detail" not in render_result(result)

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="detect"))


# ── Classifier ops ────────────────────────────────────────────────────


class TestDetectRenderer:
    def test_type_and_confidence(self) -> None:
        result = _ok(
            "detect",
            type="task",
            confidence=0.8333,
            scores={"task": 0.8333, "list": 0.0, "note": 0.1667},
        )
        output = render_result(result)
        assert output.startswith("OK")
        assert "type: task" in output
        assert "confidence: 0.83" in output
        assert "task *" in output
        assert "0.17" in output

    def test_without_scores(self) -> None:
        output = render_result(_ok("detect", type="note", confidence=0.5))
        assert "type: note" in output
        assert "Confidence" not in output


class TestConfidenceRenderer:
    def test_fields(self) -> None:
        result = _ok("confidence", type="task", confidence=0.0, detected="list")
        output = render_result(result)
        assert "type: task" in output
        assert "confidence: 0.00" in output
        assert "detected: list" in output


class TestExtractRenderers:
    def test_items_numbered(self) -> None:
        output = render_result(_ok("extract_items", items=["Milk", "Eggs"], count=2))
        assert "count: 2" in output
        assert "1. Milk" in output
        assert "2. Eggs" in output

    def test_no_items(self) -> None:
        output = render_result(_ok("extract_items", items=[], count=0))
        assert "count: 0" in output

    def test_due_date(self) -> None:
        output = render_result(_ok("extract_due", due_date="2025-01-16"))
        assert "due_date: 2025-01-16" in output

    def test_no_due_date(self) -> None:
        output = render_result(_ok("extract_due", due_date=None))
        assert "due_date: -" in output


class TestCaptureRenderer:
    def test_list_capture(self) -> None:
        result = _ok(
            "capture",
            title="Shopping list",
            content_type="list",
            suggested_type="list",
            source="auto",
            confidence=0.89,
            due_date=None,
            items=["Milk", "Eggs"],
            needs_confirmation=False,
        )
        output = render_result(result)
        assert "title: Shopping list" in output
        assert "content_type: list" in output
        assert "source: auto" in output
        assert "items: 2" in output
        assert "1. Milk" in output
        assert "due_date" not in output
        assert "needs confirmation" not in output

    def test_fallback_capture(self) -> None:
        result = _ok(
            "capture",
            title="Meeting with Sam",
            content_type="note",
            suggested_type="task",
            source="fallback",
            confidence=0.67,
            due_date=None,
            items=[],
            needs_confirmation=True,
        )
        output = render_result(result)
        assert "suggested_type: task" in output
        assert "needs confirmation" in output

    def test_task_due_date(self) -> None:
        result = _ok("capture", title="Buy milk", content_type="task", due_date="2025-01-16")
        assert "due_date: 2025-01-16" in render_result(result)


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("custom", name="x", tags=["a", "b"]))
        assert "custom" in output
        assert "name: x" in output
        assert '["a","b"]' in output


class TestVerboseMeta:
    def test_telemetry_tree(self) -> None:
        result = ServiceResult(
            ok=True,
            op="detect",
            data={"type": "task", "confidence": 0.83},
            meta={
                "telemetry": {
                    "name": "CaptureService.detect",
                    "duration_ms": 0.42,
                    "children": [
                        {
                            "name": "score_signals",
                            "duration_ms": 0.3,
                            "annotations": {"task": 5.0},
                        }
                    ],
                }
            },
        )
        output = render_result(result, verbose=True)
        assert "CaptureService.detect" in output
        assert "score_signals" in output
        assert "task=5.0" in output
        assert "0.420ms" in output

    def test_meta_hidden_without_verbose(self) -> None:
        result = ServiceResult(
            ok=True,
            op="detect",
            data={"type": "task"},
            meta={"telemetry": {"name": "CaptureService.detect", "duration_ms": 0.1}},
        )
        assert "CaptureService.detect" not in render_result(result)


# ── Quiet mode ────────────────────────────────────────────────────────


class TestRenderQuiet:
    def test_detect(self) -> None:
        assert render_quiet(_ok("detect", type="task")) == "task"

    def test_confidence(self) -> None:
        assert render_quiet(_ok("confidence", confidence=0.8333)) == "0.83"

    def test_items(self) -> None:
        assert render_quiet(_ok("extract_items", items=["Milk", "Eggs"])) == "Milk\nEggs"

    def test_due(self) -> None:
        assert render_quiet(_ok("extract_due", due_date="2025-01-16")) == "2025-01-16"
        assert render_quiet(_ok("extract_due", due_date=None)) == ""

    def test_capture(self) -> None:
        assert render_quiet(_ok("capture", content_type="note")) == "note"

    def test_error(self) -> None:
        output = render_quiet(_err("capture", "EMPTY_INPUT", "Nothing to capture"))
        assert output.startswith("ERROR: capture")
        assert "Nothing to capture" in output

    def test_unknown_op(self) -> None:
        assert render_quiet(_ok("custom")) == "OK: custom"
