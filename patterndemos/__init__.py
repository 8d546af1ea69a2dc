"""Console demonstrations of the Model-View-Controller and layered architecture patterns."""

__version__ = "0.1.0"