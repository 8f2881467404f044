"""Alembic migration environment for CourseManager."""
