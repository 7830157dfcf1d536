"""Multi-tenant resource management core: roles, permissions, template lineages."""

__version__ = "0.1.0"
