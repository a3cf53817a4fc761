"""Writing D-Bus values in the D-Bus wire format."""

__version__ = "0.1.0"

__all__ = ["containers", "integers", "ostream", "scalars", "utils", "validation"]