"""CollabLite: project and task collaboration over GraphQL."""

__version__ = "0.1.0"
