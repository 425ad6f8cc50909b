"""Utility modules for rsconfig (logging)."""
