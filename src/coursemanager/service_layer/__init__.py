"""Service layer: repositories mediating access to the catalog."""
