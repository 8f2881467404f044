"""The ``coursemanager`` command-line interface."""
