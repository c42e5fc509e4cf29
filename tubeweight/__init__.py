"""Steel tube weight calculator: hollow round, square and rectangular sections."""

__version__ = "1.0.0"
