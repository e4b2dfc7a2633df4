"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, latercap.toml only contains
overrides.  An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- latercap.toml sections ---


class CaptureConfig(BaseModel):
    """[capture] section."""

    model_config = {"frozen": True}

    auto_apply_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    title_max_length: int = Field(default=80, ge=8)
    prefill_due_date: bool = True
    prefill_items: bool = True


class VocabularyConfig(BaseModel):
    """[vocabulary] section: extra terms merged into the built-in tables."""

    model_config = {"frozen": True}

    extra_action_verbs: list[str] = Field(default_factory=list)
    extra_time_phrases: list[str] = Field(default_factory=list)
    extra_priority_markers: list[str] = Field(default_factory=list)
    extra_list_keywords: list[str] = Field(default_factory=list)

    @property
    def is_default(self) -> bool:
        return not (
            self.extra_action_verbs
            or self.extra_time_phrases
            or self.extra_priority_markers
            or self.extra_list_keywords
        )
