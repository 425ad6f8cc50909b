"""Core configuration functionality for rsconfig."""
