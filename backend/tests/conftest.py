from __future__ import annotations

import copy
import json

import pytest

from storage_planner.storage_engine.catalog import DEFAULT_CATALOG_PATH, load_catalog


@pytest.fixture
def catalog_data() -> dict:
    """Fresh copy of the bundled catalog JSON, safe to mutate."""
    with open(DEFAULT_CATALOG_PATH, encoding="utf-8") as fh:
        return copy.deepcopy(json.load(fh))


@pytest.fixture
def catalog(catalog_data):
    return load_catalog(catalog_data)
