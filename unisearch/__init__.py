# Unisearch Package
"""
Unicode character search with usage-aware ranking.

Packages:
  - comparison: Order primitives and ranking comparators
  - search: Query matching, usage statistics, search sessions
  - services: Character catalog, usage store, remote lookup
  - panels: Text presentation of results and pin settings
"""

__version__ = "0.1.0-dev"
