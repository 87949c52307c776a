"""Mediator dispatch benchmarks (pytest-benchmark).

Run with::

    pytest tests/benchmarks/bench_mediator.py --benchmark-sort=median
"""
