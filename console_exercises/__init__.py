"""Console exercises: small menu-driven programs over in-memory records."""

__version__ = "0.1.0"
