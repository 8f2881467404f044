"""Functional (black-box) tests of the ``coursemanager`` CLI."""
