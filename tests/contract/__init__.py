"""Contract tests.

Every test here runs once per persistence backend (see the `uow_builder`
fixture) and asserts only what callers can observe, so the backends stay
interchangeable.
"""
