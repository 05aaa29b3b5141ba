"""Application search – tokenised, weighted, optionally fuzzy full-text search."""
from mp_listdata.application.search.config import (
    FuzzyMatcher,
    SearchConfig,
    character_overlap_ratio,
    edit_distance_ratio,
    levenshtein,
)
from mp_listdata.application.search.engine import SearchEngine
from mp_listdata.application.search.query import SearchOptions, SearchRequest
from mp_listdata.application.search.result import SearchMetrics, SearchResult
from mp_listdata.application.search.tokenizer import extract_top_terms, tokenize

__all__ = [
    "FuzzyMatcher",
    "SearchConfig",
    "SearchEngine",
    "SearchMetrics",
    "SearchOptions",
    "SearchRequest",
    "SearchResult",
    "character_overlap_ratio",
    "edit_distance_ratio",
    "extract_top_terms",
    "levenshtein",
    "tokenize",
]
