"""
Article Routes - Server rendered pages for articles and tags
"""

from flask import Blueprint, render_template, request, redirect, url_for, flash
import structlog

from constants import BUILD_VERSION
from exceptions import ValidationException
from repositories.article_repository import ArticleRepository, permit_article_params
from tag_cloud import tag_cloud

logger = structlog.get_logger("routes.articles")

articles_bp = Blueprint("articles", __name__)


def _render_index(articles, tag=None):
    return render_template(
        "articles/index.html",
        title=f"Articles tagged {tag}" if tag else "Articles",
        articles=articles,
        current_tag=tag,
        tag_cloud=tag_cloud(),
        build_version=BUILD_VERSION,
    )


def _render_form(template, article, form, error=None, status_code=200):
    return (
        render_template(
            template,
            title="Edit Article" if article is not None else "New Article",
            article=article,
            form=form,
            error=error,
            build_version=BUILD_VERSION,
        ),
        status_code,
    )


@articles_bp.route("/")
@articles_bp.route("/articles")
def index():
    """List articles, optionally filtered with ?tag="""
    tag = request.args.get("tag")
    if tag:
        return tagged(tag)
    return _render_index(ArticleRepository.get_all())


@articles_bp.route("/tags/<path:tag>")
def tagged(tag):
    """Articles tagged with `tag`; unknown tags render the 404 page"""
    return _render_index(ArticleRepository.tagged_with(tag), tag=tag)


@articles_bp.route("/articles/new")
def new():
    return _render_form("articles/new.html", None, {})


@articles_bp.route("/articles", methods=["POST"])
def create():
    form = permit_article_params(request.form)
    try:
        article = ArticleRepository.create(**form)
    except ValidationException as e:
        return _render_form("articles/new.html", None, form, error=e.message, status_code=422)

    flash("Created article.", "notice")
    return redirect(url_for("articles.show", id=article.id))


@articles_bp.route("/articles/<int:id>")
def show(id):
    article = ArticleRepository.get_or_404(id)
    return render_template("articles/show.html", title=article.name, article=article, build_version=BUILD_VERSION)


@articles_bp.route("/articles/<int:id>/edit")
def edit(id):
    article = ArticleRepository.get_or_404(id)
    form = {
        "name": article.name,
        "published_on": article.published_on.isoformat() if article.published_on else "",
        "content": article.content or "",
        "tag_list": article.tag_list,
    }
    return _render_form("articles/edit.html", article, form)


@articles_bp.route("/articles/<int:id>", methods=["POST", "PUT", "PATCH"])
def update(id):
    article = ArticleRepository.get_or_404(id)
    form = permit_article_params(request.form)
    try:
        ArticleRepository.update(article, **form)
    except ValidationException as e:
        return _render_form("articles/edit.html", article, form, error=e.message, status_code=422)

    flash("Updated article.", "notice")
    return redirect(url_for("articles.show", id=article.id))
