"""
Repository for Article database operations
"""

import structlog
from sqlalchemy.exc import SQLAlchemyError
from db import db
from models.article import Article
from constants import ARTICLE_PERMITTED_FIELDS
from exceptions import ArticleNotFoundException, DatabaseException, ValidationException
from metrics import articles_saved_total
from repositories.tag_repository import TagRepository
from utils import parse_date

logger = structlog.get_logger("articles")


def permit_article_params(data):
    """Keep only the fields an article form may set"""
    return {key: data[key] for key in ARTICLE_PERMITTED_FIELDS if key in data}


def _clean_fields(fields, require_name):
    """Validate and coerce article form fields"""
    cleaned = dict(fields)

    if "name" in cleaned or require_name:
        name = (cleaned.get("name") or "").strip()
        if not name:
            raise ValidationException("Name can't be blank", field="name")
        cleaned["name"] = name

    if "published_on" in cleaned:
        try:
            cleaned["published_on"] = parse_date(cleaned["published_on"])
        except (ValueError, TypeError):
            raise ValidationException("Published on must be a date (YYYY-MM-DD)", field="published_on")

    return cleaned


def _apply(article, fields):
    # tag_list last so the tag lookups see the rest of the article already set
    tag_list = fields.pop("tag_list", None)
    for key, value in fields.items():
        setattr(article, key, value)
    if tag_list is not None:
        article.tag_list = tag_list


class ArticleRepository:
    """Repository for Article database operations"""

    @staticmethod
    def get_all():
        """Get all Article records, newest first"""
        return Article.query.order_by(Article.created_at.desc(), Article.id.desc()).all()

    @staticmethod
    def get_by_id(id):
        """Get Article by ID"""
        return db.session.get(Article, id)

    @staticmethod
    def get_or_404(id):
        """Get Article by ID, raising ArticleNotFoundException when missing"""
        article = ArticleRepository.get_by_id(id)
        if article is None:
            raise ArticleNotFoundException(id)
        return article

    @staticmethod
    def tagged_with(name):
        """Get all articles tagged with the named tag"""
        tag = TagRepository.get_by_name_or_404(name)
        return tag.articles.order_by(Article.created_at.desc(), Article.id.desc()).all()

    @staticmethod
    def create(**kwargs):
        """Create new Article record"""
        fields = _clean_fields(kwargs, require_name=True)
        try:
            item = Article()
            db.session.add(item)
            _apply(item, fields)
            db.session.commit()
            db.session.refresh(item)
        except ValidationException:
            db.session.rollback()
            raise
        except SQLAlchemyError as e:
            db.session.rollback()
            raise DatabaseException(f"Could not create article: {e}") from e

        articles_saved_total.labels(action="create").inc()
        logger.info(f"Created article {item.id}")
        return item

    @staticmethod
    def update(article, **kwargs):
        """Update Article record"""
        fields = _clean_fields(kwargs, require_name=False)
        try:
            _apply(article, fields)
            db.session.commit()
        except ValidationException:
            db.session.rollback()
            raise
        except SQLAlchemyError as e:
            db.session.rollback()
            raise DatabaseException(f"Could not update article {article.id}: {e}") from e

        articles_saved_total.labels(action="update").inc()
        logger.info(f"Updated article {article.id}")
        return article

    @staticmethod
    def count():
        """Count total Article records"""
        return Article.query.count()
