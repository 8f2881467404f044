"""Integration tests.

Exercise real SQLite databases (files under pytest's ``tmp_path``), Alembic
migrations, and the wiring in `coursemanager.bootstrap`.
"""
