# albumfinder/state.py
"""In-memory UI state for one page load."""

from dataclasses import dataclass, field
from typing import List, Optional

from .models import Album, Artist


@dataclass
class SearchState:
    query_text: str = ""
    suggestions: List[Artist] = field(default_factory=list)
    albums: List[Album] = field(default_factory=list)
    access_token: Optional[str] = None

    @property
    def show_suggestions(self) -> bool:
        return bool(self.suggestions)
