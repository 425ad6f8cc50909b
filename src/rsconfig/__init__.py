"""
rsconfig - Typed configuration registry for a search engine module

A fixed, declaratively described set of named configuration options that can be
loaded once from startup tokens, read and changed one at a time at runtime
(subject to immutability rules), and dumped for diagnostics.

Package Structure:
- core/config/: Option kinds, the declared option table and the registry
- core/utils/: Logging utilities
- cli/: Diagnostic command-line interface
"""

__version__ = "0.1.0"
