import pytest

from surfscore.conditions import load_conditions


@pytest.fixture(autouse=True)
def _fresh_dataset_cache():
    load_conditions.cache_clear()
    yield
    load_conditions.cache_clear()
