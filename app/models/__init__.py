"""
Models package

Each database model lives in its own file:
- article.py
- tag.py
- tagging.py

Usage:
    from models import Article, Tag, Tagging
"""

from .tagging import Tagging
from .tag import Tag
from .article import Article

__all__ = [
    "Article",
    "Tag",
    "Tagging",
]
