"""Shared pytest fixtures for csnql tests."""

from pathlib import Path

import pytest
from pydantic import StrictStr

from csnql.core import ir


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def csn_fixtures_dir(fixtures_dir: Path) -> Path:
    """Return path to CSN fixtures directory."""
    return fixtures_dir / "csn"


@pytest.fixture
def bookshop_csn(csn_fixtures_dir: Path) -> str:
    """Return CSN text with one service and one entity."""
    return (csn_fixtures_dir / "bookshop.json").read_text(encoding="utf-8")


@pytest.fixture
def simple_entity() -> ir.Entity:
    """Return a simple entity for testing."""
    return ir.Entity(
        name="TestService.TestEntity",
        elements=(
            ir.Element(name="ID", key=True, kind=ir.UUIDKind()),
            ir.Element(
                name="name",
                kind=ir.StringKind(default=ir.Val[StrictStr](val="myDefaultName"), length=100),
            ),
            ir.Element(name="age", kind=ir.IntegerKind()),
        ),
    )
