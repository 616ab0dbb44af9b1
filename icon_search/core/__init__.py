"""Core search engine functionality."""

from .engine import SearchEngine
from .fuzzy_matcher import edit_distance, within_distance
from .normalizer import tokenize
from .ranker import categories, search
from .scorer import score
from .synonyms import expand

__all__ = [
    "SearchEngine",
    "tokenize",
    "expand",
    "edit_distance",
    "within_distance",
    "score",
    "search",
    "categories",
]
