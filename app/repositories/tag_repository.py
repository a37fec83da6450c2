"""
Repository for Tag database operations
Tag lookup, on-demand creation and usage counts
"""

import structlog
from sqlalchemy import func
from db import db
from models.tag import Tag
from models.tagging import Tagging
from exceptions import TagNotFoundException
from metrics import tags_created_total

logger = structlog.get_logger("tags")


class TagRepository:
    """Repository for Tag database operations"""

    @staticmethod
    def find_by_name(name):
        """Get Tag whose name matches exactly, or None"""
        return Tag.query.filter_by(name=name).first()

    @staticmethod
    def get_by_name_or_404(name):
        """Get Tag by name, raising TagNotFoundException when missing"""
        tag = TagRepository.find_by_name(name)
        if tag is None:
            raise TagNotFoundException(name)
        return tag

    @staticmethod
    def create(name):
        """
        Create new Tag record.

        The row is flushed, not committed: it becomes part of the caller's
        transaction. A concurrent writer creating the same name makes the
        flush fail with IntegrityError, which is left to the caller.
        """
        item = Tag(name=name)
        db.session.add(item)
        db.session.flush()
        tags_created_total.inc()
        logger.info(f"Created tag {item.name!r}")
        return item

    @staticmethod
    def usage_counts():
        """List of (Tag, count) pairs for every tag used by at least one article"""
        rows = (
            db.session.query(Tag, func.count(Tagging.tag_id).label("count"))
            .join(Tagging, Tagging.tag_id == Tag.id)
            .group_by(Tag.id)
            .order_by(Tag.name)
            .all()
        )
        return [(tag, count) for tag, count in rows]

    @staticmethod
    def set_article_tags(article, tags):
        """Replace the article's tag collection with exactly `tags`"""
        # Collection assignment lets SQLAlchemy diff old and new taggings:
        # removed ones are deleted, kept ones stay untouched.
        article.tags = list(tags)

    @staticmethod
    def count():
        """Count total Tag records"""
        return Tag.query.count()
