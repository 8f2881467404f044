"""Unit tests.

Each test exercises one module in isolation: no database files, no network,
deterministic ids. The in-memory store and private ``:memory:`` SQLite engines
count as isolated.
"""
