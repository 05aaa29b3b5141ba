"""conftest.py for benchmarks.

Provides session-scoped record sets so generation cost stays out of the
timed sections.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from mp_listdata.testing import RecordBuilder

_WORDS = ("fitness", "yoga", "downtown", "studio", "office", "center", "lake", "classes")


@pytest.fixture(scope="session")
def catalogue() -> list[dict[str, Any]]:
    """10 000 mapping records with text, numbers, dates and some gaps."""
    size = 10_000
    start = datetime(2024, 1, 1, tzinfo=UTC)
    return RecordBuilder().many(
        name=[f"Item {i:05d}" for i in range(size)],
        description=[
            f"{_WORDS[i % len(_WORDS)]} {_WORDS[(i * 7) % len(_WORDS)]} number {i}" for i in range(size)
        ],
        price=[None if i % 17 == 0 else (i * 37) % 500 / 10 for i in range(size)],
        active=[i % 3 != 0 for i in range(size)],
        created_at=[start + timedelta(hours=i) for i in range(size)],
    )
