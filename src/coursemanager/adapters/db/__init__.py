"""Relational database plumbing: engine factory, metadata, schema, migrations."""
