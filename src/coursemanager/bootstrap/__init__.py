"""Bootstrap (composition root) for CourseManager.

Assembles the application at runtime: wires concrete persistence adapters to
the repositories and reads configuration. Also hosts the backend builders that
hand out isolated units of work for the in-memory and SQLite backends.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `coursemanager.adapters`, `coursemanager.service_layer`,
  `coursemanager.interfaces`, `coursemanager.domain`, and `coursemanager.config`.
- Inner layers must not import `coursemanager.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap, build_write_uow
from .builders import InMemoryUnitOfWorkBuilder, SqliteUnitOfWorkBuilder

__all__ = [
    "AppContainer",
    "InMemoryUnitOfWorkBuilder",
    "SqliteUnitOfWorkBuilder",
    "bootstrap",
    "build_write_uow",
]
