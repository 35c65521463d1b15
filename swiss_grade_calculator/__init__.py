"""Swiss Grade Calculator - points to grades on a configurable curve."""

__version__ = "1.0.0"
