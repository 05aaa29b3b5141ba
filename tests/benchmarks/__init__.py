"""List-data pipeline benchmarks (pytest-benchmark).

Run with ``pytest tests/benchmarks --benchmark-sort=median``; add
``--benchmark-disable`` to run them as plain tests.
"""
