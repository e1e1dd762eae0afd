"""Construction measurement engine: fractions, unit conversion and geometry."""

__version__ = "1.0.0"
