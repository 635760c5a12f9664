"""conftest.py for benchmarks.

One event loop is shared by the whole session so async dispatch timings do
not include loop start-up.
"""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture(scope="session")
def bench_loop():
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture(scope="session")
def run_async(bench_loop):
    """Run an awaitable to completion in the session loop."""

    def _run(awaitable):
        return bench_loop.run_until_complete(awaitable)

    return _run
