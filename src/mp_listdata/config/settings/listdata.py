"""Config settings – ListDataSettings, every tunable of the engine."""
from __future__ import annotations

import dataclasses

from mp_listdata.config.settings.base import Settings
from mp_listdata.config.validation import InvalidSettingValueError

DEFAULT_STOP_WORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to",
    "for", "of", "with", "by", "is", "are", "was", "were", "be", "been",
})

DEFAULT_TEXT_FIELD_HINTS: tuple[str, ...] = (
    "name", "title", "description", "content", "text", "email",
)


@dataclasses.dataclass
class ListDataSettings(Settings):
    """Engine settings, loadable from ``LISTDATA_*`` environment variables."""

    _prefix = "LISTDATA"

    default_page_size: int = 100
    max_page_size: int = 100
    fuzzy_threshold: float = 0.6
    fuzzy_weight: float = 0.5
    exact_match_score: float = 1.0
    highlight_context: int = 50
    highlight_pre: str = "<mark>"
    highlight_post: str = "</mark>"
    stop_words: frozenset[str] = DEFAULT_STOP_WORDS
    text_field_hints: tuple[str, ...] = DEFAULT_TEXT_FIELD_HINTS

    def _validate(self) -> None:
        if self.max_page_size < 1:
            raise InvalidSettingValueError("max_page_size", self.max_page_size, "must be >= 1")
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise InvalidSettingValueError(
                "default_page_size",
                self.default_page_size,
                f"must be between 1 and max_page_size ({self.max_page_size})",
            )
        if not 0.0 <= self.fuzzy_threshold <= 1.0:
            raise InvalidSettingValueError("fuzzy_threshold", self.fuzzy_threshold, "must be within [0, 1]")
        if self.fuzzy_weight < 0:
            raise InvalidSettingValueError("fuzzy_weight", self.fuzzy_weight, "must be >= 0")
        if self.exact_match_score <= 0:
            raise InvalidSettingValueError("exact_match_score", self.exact_match_score, "must be > 0")
        if self.highlight_context < 0:
            raise InvalidSettingValueError("highlight_context", self.highlight_context, "must be >= 0")
        self.stop_words = frozenset(word.lower() for word in self.stop_words)
        self.text_field_hints = tuple(hint.lower() for hint in self.text_field_hints)


__all__ = ["DEFAULT_STOP_WORDS", "DEFAULT_TEXT_FIELD_HINTS", "ListDataSettings"]
