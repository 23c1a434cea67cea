from __future__ import annotations

from typing import Iterator

import pytest

from flagquery.application.provider import FeatureContext


@pytest.fixture(autouse=True)
def _no_ambient_provider() -> Iterator[None]:
    FeatureContext.clear()
    yield
    FeatureContext.clear()
