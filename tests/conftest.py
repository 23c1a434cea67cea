"""Shared fixtures: the three example capabilities from ``fixtures/features.json``."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from flagquery.kernel.capabilities import CapabilityStore

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def features() -> list[dict[str, Any]]:
    return json.loads((FIXTURES / "features.json").read_text(encoding="utf-8"))


@pytest.fixture
def store(features: list[dict[str, Any]]) -> CapabilityStore:
    return CapabilityStore.from_records(features)
