"""vbcbuild - VB.NET compiler option emission and resource linkage resolution."""

__version__ = "0.1.0"
