"""
Pytest configuration for test discovery and imports.

Provides fixtures for testing including:
- Empty registries
- Sample players, teams and lineups
"""

import os
import sys
from pathlib import Path
import pytest


# Determine paths
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
tests_path = project_root / "tests"

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def pytest_configure(config):
    """Configure pytest - runs very early in startup.

    Project root and src/ go to the front of sys.path, and tests/ is
    dropped so tests/ui cannot shadow the ui package.
    """
    seen = set()
    new_path = []
    for p in sys.path:
        if p not in seen and p != str(tests_path):
            seen.add(p)
            new_path.append(p)

    for path in [str(src_path), str(project_root)]:
        if path in new_path:
            new_path.remove(path)

    new_path.insert(0, str(src_path))
    new_path.insert(0, str(project_root))

    sys.path[:] = new_path


# ============================================================================
# REGISTRY FIXTURES
# ============================================================================

@pytest.fixture
def registry():
    """Empty registry with the default capacity."""
    from player_registry.player_registry import PlayerRegistry
    return PlayerRegistry()


@pytest.fixture
def make_person():
    """Factory for players with sensible default measurements."""
    from roster.person import Person

    def _make(name, jersey_number, height=190, weight=85):
        return Person.create(name, jersey_number, height, weight)

    return _make


@pytest.fixture
def alice(make_person):
    return make_person("Alice", 7, height=175, weight=65)


@pytest.fixture
def bob(make_person):
    return make_person("Bob", 23, height=198, weight=95)


@pytest.fixture
def carol(make_person):
    return make_person("Carol", 11, height=183, weight=72)


@pytest.fixture
def team():
    from roster.team import Team
    return Team("Lakers")


@pytest.fixture
def other_team():
    from roster.team import Team
    return Team("Celtics")


@pytest.fixture
def lineups():
    """Three lineups in a fixed order."""
    from roster.lineup import Lineup
    return [Lineup("Starters"), Lineup("Bench"), Lineup("Closing")]


@pytest.fixture
def populated_registry(registry, alice, bob, carol):
    """Registry holding Alice, Bob and Carol (in that order)."""
    for person in (alice, bob, carol):
        registry.add_person(person)
    return registry
