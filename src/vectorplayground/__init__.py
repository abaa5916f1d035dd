"""Vector Playground: interactive 3D vector operations."""

__version__ = "0.1.0"
