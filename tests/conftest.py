from __future__ import annotations

import pytest

from helpers import Oracle


@pytest.fixture(scope="session")
def oracle() -> Oracle:
    return Oracle()
