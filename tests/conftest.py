"""
Shared fixtures for the visualizer schema tests.
"""

import sys
from pathlib import Path

import pytest

# Ensure the project root is importable when running `pytest` uninstalled
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from shared import Config
from state import new_session


# ============================================================================
# Shared Fixtures
# ============================================================================


@pytest.fixture
def config():
    return Config(array_size=8, max_array_size=32)


@pytest.fixture
def session(config):
    """Compare-mode session, nothing run yet."""
    return new_session(config, seed=7, view_mode="compare")


@pytest.fixture
def finished_session(session):
    """Both runs finished and sorted: primary 120 ms, secondary 200 ms."""
    session.primary.stats.start(now=1_000)
    session.primary.stats.record_comparison(28)
    session.primary.stats.record_swap(12)
    session.primary.stats.finish(now=1_120)
    session.primary.mark_sorted()

    session.secondary.stats.start(now=1_000)
    session.secondary.stats.record_comparison(40)
    session.secondary.stats.record_swap(9)
    session.secondary.stats.finish(now=1_200)
    session.secondary.mark_sorted()
    return session


@pytest.fixture
def client(config):
    from main import app

    app.config.update(TESTING=True, SORTVIS=config)
    with app.test_client() as c:
        yield c
