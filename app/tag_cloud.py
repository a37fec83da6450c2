"""
Tag cloud - size classes from tag usage counts
"""

import math
from typing import List, Optional, Sequence, Tuple


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from zero (2.5 -> 3, not 2)"""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def bucket_tags(tags: Sequence[Tuple[object, int]], labels: Sequence[str]) -> List[Tuple[object, str]]:
    """
    Pair each (tag, count) with a label proportional to its usage.

    The most used tag gets the last label and a tag with count 0 gets the
    first; everything else lands at round(count / max * (len(labels) - 1)).
    Input order is kept.
    """
    if not labels:
        raise ValueError("At least one tag cloud label is required")

    tags = list(tags)
    if not tags:
        return []

    # Linear scan, there is no need to sort just to find the largest count
    max_count = max(count for _, count in tags)
    last = len(labels) - 1

    result = []
    for tag, count in tags:
        ratio = float(count) / max_count if max_count else 0.0
        result.append((tag, labels[round_half_up(ratio * last)]))
    return result


def tag_cloud(labels: Optional[Sequence[str]] = None, store=None):
    """Bucketed usage counts of every tagged tag"""
    if store is None:
        from repositories.tag_repository import TagRepository

        store = TagRepository
    if labels is None:
        from settings import get_tag_cloud_classes

        labels = get_tag_cloud_classes()

    counts = store.usage_counts()
    buckets = bucket_tags(counts, labels)
    return [(tag, count, label) for (tag, count), (_, label) in zip(counts, buckets)]
