"""Square matrices of floats with arithmetic, powers, transpose and determinant, plus a demo command."""

__version__ = "0.1.0"
__all__ = ["matrix", "demo"]