"""CourseManager

A small author/course catalog data-access layer. Repositories enforce
validation and default-value policy over a unit of work that can be backed
either by an in-memory store or by a relational database through SQLAlchemy.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
