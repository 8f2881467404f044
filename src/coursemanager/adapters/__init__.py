"""Concrete implementations of the CourseManager interfaces."""
