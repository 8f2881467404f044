"""Domain model for the CourseManager catalog."""

from .entities import Author, Country, Course

__all__ = ["Author", "Country", "Course"]
