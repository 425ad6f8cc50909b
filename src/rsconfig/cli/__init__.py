"""Command-line interface for rsconfig."""
