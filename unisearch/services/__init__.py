# Unisearch Services Package
"""
Backend services for Unisearch.

Services handle the character catalog, usage persistence, and remote lookup.
"""

from .catalog import CharacterService, load_unicode_catalog
from .lookup import UnicodeLookupService
from .usage import UsageStore

__all__ = [
    "CharacterService",
    "UnicodeLookupService",
    "UsageStore",
    "load_unicode_catalog",
]
