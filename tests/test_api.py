"""
Tests for API endpoints
"""
import json


class TestHealthEndpoint:

    def test_health_returns_healthy(self, client):
        response = client.get("/api/health")
        data = json.loads(response.data)

        assert response.status_code == 200
        assert data["data"]["status"] == "healthy"


class TestArticlesEndpoint:

    def test_list_articles(self, client, sample_articles):
        response = client.get("/api/articles")
        data = response.get_json()

        assert response.status_code == 200
        assert data["success"] is True
        assert len(data["data"]) == 3

    def test_list_articles_by_tag(self, client, sample_articles):
        data = client.get("/api/articles?tag=movies").get_json()
        assert [a["name"] for a in data["data"]] == ["Batman Begins"]
        assert set(data["data"][0]["tags"]) == {"batman", "movies", "comics"}
        assert data["data"][0]["published_on"] == "2005-06-15"

    def test_unknown_tag(self, client, sample_articles):
        response = client.get("/api/articles?tag=superman")
        data = response.get_json()

        assert response.status_code == 404
        assert data["code"] == "NOT_FOUND"
        assert data["message"] == "No such tag: superman"

    def test_get_article(self, client, sample_articles):
        data = client.get(f"/api/articles/{sample_articles[1].id}").get_json()
        assert data["data"]["name"] == "The Dark Knight Returns"

    def test_missing_article(self, client):
        response = client.get("/api/articles/999")
        assert response.status_code == 404
        assert response.get_json()["success"] is False
        assert response.get_json()["message"] == "Article 999 not found"


class TestTagsEndpoint:

    def test_usage_counts(self, client, sample_articles):
        data = client.get("/api/tags").get_json()
        assert [(t["name"], t["count"]) for t in data["data"]] == [("batman", 3), ("comics", 2), ("movies", 1)]

    def test_tag_cloud(self, client, sample_articles):
        data = client.get("/api/tags/cloud").get_json()
        classes = {t["name"]: t["css_class"] for t in data["data"]}
        # batman 3/3*3=3, comics 2/3*3=2, movies 1/3*3=1
        assert classes == {"batman": "css4", "comics": "css3", "movies": "css2"}

    def test_tag_cloud_custom_classes(self, client, sample_articles):
        data = client.get("/api/tags/cloud?classes=small,large").get_json()
        classes = {t["name"]: t["css_class"] for t in data["data"]}
        assert classes == {"batman": "large", "comics": "large", "movies": "small"}

    def test_tag_cloud_rejects_empty_classes(self, client, sample_articles):
        response = client.get("/api/tags/cloud?classes=,")
        assert response.status_code == 400
        assert response.get_json()["code"] == "VALIDATION_ERROR"
        assert response.get_json()["message"] == "At least one tag cloud label is required"

    def test_metrics(self, client, sample_articles):
        response = client.get("/api/metrics")
        assert response.status_code == 200
        assert b"tagboard_articles_total 3.0" in response.data
