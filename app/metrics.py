from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from flask import Response, request
import time

# Database Metrics
db_articles_total = Gauge("tagboard_articles_total", "Total number of articles")
db_tags_total = Gauge("tagboard_tags_total", "Total number of tags")

# Tagging Metrics
tags_created_total = Counter("tagboard_tags_created_total", "Tags created on demand from tag lists")

articles_saved_total = Counter("tagboard_articles_saved_total", "Articles saved", ["action"])

# API Metrics
api_request_duration_seconds = Histogram(
    "tagboard_request_duration_seconds", "Request duration", ["endpoint", "method"]
)

api_requests_total = Counter("tagboard_requests_total", "Total requests", ["endpoint", "method", "status_code"])


def init_metrics(app):
    @app.route("/api/metrics")
    def metrics():
        update_db_metrics()
        return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)

    @app.before_request
    def before_request():
        request.start_time = time.time()

    @app.after_request
    def after_request(response):
        duration = time.time() - getattr(request, "start_time", time.time())
        api_request_duration_seconds.labels(endpoint=request.endpoint or "unknown", method=request.method).observe(
            duration
        )
        api_requests_total.labels(
            endpoint=request.endpoint or "unknown", method=request.method, status_code=response.status_code
        ).inc()
        return response

    app.logger.info("Prometheus metrics initialized at /api/metrics")


def update_db_metrics():
    """Update article and tag totals."""
    from repositories.article_repository import ArticleRepository
    from repositories.tag_repository import TagRepository

    db_articles_total.set(ArticleRepository.count())
    db_tags_total.set(TagRepository.count())
