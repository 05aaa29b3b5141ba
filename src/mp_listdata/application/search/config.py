"""Application search – SearchConfig and fuzzy matchers."""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from mp_listdata.config.settings import DEFAULT_STOP_WORDS, DEFAULT_TEXT_FIELD_HINTS, ListDataSettings

__all__ = [
    "FuzzyMatcher",
    "SearchConfig",
    "character_overlap_ratio",
    "edit_distance_ratio",
    "levenshtein",
]

FuzzyMatcher = Callable[[str, str], float]


def character_overlap_ratio(text: str, term: str) -> float:
    """Share of *term*'s characters that occur anywhere in *text*.

    A coarse approximation, not an edit distance: ``"recieve"`` scores 1.0
    against ``"receive"`` and so does any anagram.
    """
    if not term:
        return 0.0
    found = sum(1 for char in term if char in text)
    return found / len(term)


def levenshtein(left: str, right: str) -> int:
    """Classic edit distance (insert, delete, substitute all cost 1)."""
    if len(left) < len(right):
        left, right = right, left
    previous = list(range(len(right) + 1))
    for i, lchar in enumerate(left, start=1):
        current = [i]
        for j, rchar in enumerate(right, start=1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (lchar != rchar),
            ))
        previous = current
    return previous[-1]


def edit_distance_ratio(text: str, term: str) -> float:
    """Best ``1 - distance / length`` between *term* and any word of *text*.

    Opt-in replacement for :func:`character_overlap_ratio`.
    """
    if not term:
        return 0.0
    best = 0.0
    for word in text.split():
        word = word.strip(".,!?;:")
        if not word:
            continue
        longest = max(len(word), len(term))
        best = max(best, 1.0 - levenshtein(word, term) / longest)
    return best


@dataclass(frozen=True)
class SearchConfig:
    """Scoring constants and vocabularies injected into the search engine."""
    exact_match_score: float = 1.0
    fuzzy_threshold: float = 0.6
    fuzzy_weight: float = 0.5
    highlight_context: int = 50
    highlight_pre: str = "<mark>"
    highlight_post: str = "</mark>"
    stop_words: frozenset[str] = DEFAULT_STOP_WORDS
    text_field_hints: tuple[str, ...] = DEFAULT_TEXT_FIELD_HINTS
    min_term_length: int = 3
    fuzzy_matcher: FuzzyMatcher = character_overlap_ratio

    @classmethod
    def from_settings(cls, settings: ListDataSettings) -> SearchConfig:
        return cls(
            exact_match_score=settings.exact_match_score,
            fuzzy_threshold=settings.fuzzy_threshold,
            fuzzy_weight=settings.fuzzy_weight,
            highlight_context=settings.highlight_context,
            highlight_pre=settings.highlight_pre,
            highlight_post=settings.highlight_post,
            stop_words=frozenset(settings.stop_words),
            text_field_hints=tuple(settings.text_field_hints),
        )
