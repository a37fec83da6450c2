"""
API Routes - JSON access to articles and the tag cloud
"""

from flask import Blueprint, request

from api_responses import success_response, handle_api_errors
from constants import BUILD_VERSION
from repositories.article_repository import ArticleRepository
from repositories.tag_repository import TagRepository
from tag_cloud import tag_cloud

api_bp = Blueprint("api", __name__, url_prefix="/api")


@api_bp.route("/health")
def health():
    return success_response(data={"status": "healthy", "version": BUILD_VERSION})


@api_bp.route("/articles")
@handle_api_errors
def list_articles():
    """List articles, optionally filtered with ?tag="""
    tag = request.args.get("tag")
    articles = ArticleRepository.tagged_with(tag) if tag else ArticleRepository.get_all()
    return success_response(data=[a.to_dict() for a in articles])


@api_bp.route("/articles/<int:id>")
@handle_api_errors
def get_article(id):
    return success_response(data=ArticleRepository.get_or_404(id).to_dict())


@api_bp.route("/tags")
@handle_api_errors
def get_tags():
    """Tags with the number of articles using each"""
    return success_response(
        data=[{"id": tag.id, "name": tag.name, "count": count} for tag, count in TagRepository.usage_counts()]
    )


@api_bp.route("/tags/cloud")
@handle_api_errors
def get_tag_cloud():
    classes = request.args.get("classes")
    labels = [c for c in classes.split(",") if c] if classes else None
    return success_response(
        data=[
            {"name": tag.name, "count": count, "css_class": css_class}
            for tag, count, css_class in tag_cloud(labels)
        ]
    )
