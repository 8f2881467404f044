"""CourseManager test suite.

Layout
- unit/        : one module at a time, no database files, no CLI.
- integration/ : SQLite files, Alembic migrations and the composition root.
- contract/    : repository and unit-of-work scenarios run on every backend
                 (``memory`` and ``sqlite``) through the ``uow_builder`` fixture.
- functional/  : the ``coursemanager`` CLI driven through Click's CliRunner.
- fixtures/    : pytest plugins loaded from the root conftest (no tests here).

Each item is marked with its folder name; Hypothesis tests also carry
``@pytest.mark.property``.
"""
