"""Compiler option emission, source scanning and resource linkage."""
