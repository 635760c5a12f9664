"""Mediator dispatch benchmarks — uses pytest-benchmark.

Run with::

    pytest tests/benchmarks/ -v --benchmark-sort=median

Run as plain functional tests::

    pytest tests/benchmarks/ --benchmark-disable
"""
