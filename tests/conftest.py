import asyncio
import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.dependency import DependencyMap
from services.dependency_service import dependency_service


@pytest.fixture(autouse=True)
def clear_shared_map():
    """Give every test an empty shared dependency map and a lock that is not
    bound to an event loop from a previous test.
    """
    dependency_service._store = DependencyMap()
    dependency_service._lock = asyncio.Lock()

    yield

    dependency_service._store = DependencyMap()


@pytest.fixture
def chain_map():
    def build(length: int) -> DependencyMap:
        store = DependencyMap()
        for i in range(length - 1):
            store.add_dependency(f"n{i}", f"n{i + 1}")
        return store

    return build
