"""Entrypoints (inbound adapters) for CourseManager.

Expose the application to the outside world through the ``coursemanager``
command-line interface. Parse and validate inputs, call the repositories via
`coursemanager.bootstrap`, and present results.

Dependency rule: may import `coursemanager.bootstrap` and
`coursemanager.service_layer`; avoid importing `coursemanager.adapters`
directly.
"""
