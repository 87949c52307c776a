"""conftest.py for benchmarks.

Run explicitly, e.g. ``pytest tests/benchmarks/bench_mediator.py``.

The ``event_loop`` fixture is session-scoped so every benchmark drives
``Mediator.send`` on one loop and timing excludes loop start-up.
"""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture(scope="session")
def event_loop():
    """Session-scoped event loop shared by all benchmarks."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()
