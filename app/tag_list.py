"""
Tag list - comma separated editing of an article's tags

The text form is lossy: names are joined with ", " and nothing is
escaped, so a tag whose name contains a comma does not survive a round
trip through the article form.
"""

import structlog
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

from constants import TAG_LIST_SEPARATOR

logger = structlog.get_logger("tag_list")


class TagStore(Protocol):
    """
    Storage the tag list needs: find-or-create by name, usage counts
    and replacement of an article's tag set.

    TagRepository is the database implementation. find_by_name/create are
    kept separate so a unique-index backed upsert can replace them later
    without touching the callers.
    """

    def find_by_name(self, name: str):
        ...

    def create(self, name: str):
        ...

    def usage_counts(self) -> Sequence[Tuple[object, int]]:
        ...

    def set_article_tags(self, article, tags: Sequence) -> None:
        ...


def parse_tag_list(text: Optional[str]) -> List[str]:
    """
    Split comma separated text into tag names.

    Fragments are stripped, empty ones dropped and repeats removed,
    keeping the first occurrence order.
    """
    names = []
    for fragment in (text or "").split(","):
        name = fragment.strip()
        if name and name not in names:
            names.append(name)
    return names


def format_tag_list(tags: Iterable) -> str:
    return TAG_LIST_SEPARATOR.join(tag.name for tag in tags)


def tag_list(article) -> str:
    """Text form of the article's tags, in association order"""
    return format_tag_list(article.tags)


def resolve_tags(names: Iterable[str], store: TagStore) -> list:
    """Look up each name, creating missing tags; one Tag per distinct name"""
    resolved = {}
    tags = []
    for name in names:
        if name in resolved:
            continue
        tag = store.find_by_name(name)
        if tag is None:
            tag = store.create(name)
        resolved[name] = tag
        tags.append(tag)
    return tags


def set_tag_list(article, text: Optional[str], store: Optional[TagStore] = None) -> None:
    """Replace the article's whole tag set with the tags named in `text`"""
    if store is None:
        from repositories.tag_repository import TagRepository

        store = TagRepository

    names = parse_tag_list(text)
    tags = resolve_tags(names, store)
    store.set_article_tags(article, tags)
    logger.debug(f"Article {getattr(article, 'id', None)} tagged with {names}")
