"""Pytest configuration and shared fixtures for carcass layout tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from cabinetry.domain import (
    CabinetType,
    CarcassConfig,
    CarcassDimensionResolver,
    CarcassDimensions,
    LayoutDefaults,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests through the CLI")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def defaults() -> LayoutDefaults:
    """Standard layout defaults (100mm kicker, 50mm legs)."""
    return LayoutDefaults()


@pytest.fixture
def resolver(defaults: LayoutDefaults) -> CarcassDimensionResolver:
    return CarcassDimensionResolver(defaults)


@pytest.fixture
def base_dimensions() -> CarcassDimensions:
    """A 600 x 720 x 560 base carcass."""
    return CarcassDimensions(width=600, height=720, depth=560)


@pytest.fixture
def base_config() -> CarcassConfig:
    return CarcassConfig.for_cabinet_type(CabinetType.BASE)


# =============================================================================
# Config file fixtures
# =============================================================================


def _carcass_document(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "schema_version": "1.0",
        "cabinet_type": "base",
        "dimensions": {"width": 600, "height": 720, "depth": 560},
    }
    data.update(overrides)
    return data


def _merge_document(category: str = "benchtop", slabs: list | None = None) -> dict[str, Any]:
    if slabs is None:
        slabs = [
            {"id": "bt-1", "x": 0, "y": 820, "z": 0, "width": 600, "height": 38, "depth": 600},
            {"id": "bt-2", "x": 600, "y": 820, "z": 0, "width": 500, "height": 38, "depth": 600},
        ]
    return {"schema_version": "1.0", "category": category, "slabs": slabs}


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write data as JSON into the test's temporary directory."""

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def carcass_document() -> Callable[..., dict[str, Any]]:
    """Factory for a minimal valid carcass document; keyword args override keys."""
    return _carcass_document


@pytest.fixture
def merge_document() -> Callable[..., dict[str, Any]]:
    """Factory for a merge document; two contiguous benchtops by default."""
    return _merge_document
