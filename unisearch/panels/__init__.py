# Unisearch Panels Package
"""
Text presentation of search results and pin settings.
"""

from .pins import PinPanel
from .search import SearchPanel, SuggestionRow, render_matches

__all__ = ["PinPanel", "SearchPanel", "SuggestionRow", "render_matches"]
