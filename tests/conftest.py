"""Shared fixtures for the mp-listdata test-suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

import pytest
import structlog


@dataclass
class Product:
    """Dataclass record used across pipeline tests."""

    id: str
    name: str
    price: float | None = None
    description: str | None = None
    active: bool = True
    date_modified: datetime | None = None
    tags: list[str] = field(default_factory=list)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo any structlog/root-logger configuration a test installs."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def products() -> list[Product]:
    return [
        Product("p1", "Alice", price=5.0, description="Downtown Fitness Center", date_modified=datetime(2024, 3, 1, tzinfo=UTC)),
        Product("p2", "bob", price=-12.0, description="Yoga studio by the lake", active=False),
        Product("p3", "Charlie", price=7.5, description=None, date_modified=datetime(2024, 1, 15, tzinfo=UTC)),
        Product("p4", "dave", price=None, description="Office leasing, downtown", date_modified=datetime(2023, 12, 31, tzinfo=UTC)),
        Product("p5", "Eve", price=3.0, description="Fitness classes for everyone", active=False),
    ]


@pytest.fixture
def as_ids() -> Any:
    def _ids(records: list[Any]) -> list[str]:
        return [r["id"] if isinstance(r, dict) else r.id for r in records]

    return _ids
