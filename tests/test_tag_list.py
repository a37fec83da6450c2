"""
Tests for comma separated tag list editing
"""
import pytest


class TestParseTagList:
    """Tests for splitting tag list text"""

    def test_strips_and_splits(self):
        from tag_list import parse_tag_list
        assert parse_tag_list("ruby,  rails ,web dev") == ["ruby", "rails", "web dev"]

    def test_drops_empty_fragments(self):
        from tag_list import parse_tag_list
        assert parse_tag_list(" , ,, ") == []
        assert parse_tag_list("") == []
        assert parse_tag_list(None) == []

    def test_deduplicates_after_trim(self):
        from tag_list import parse_tag_list
        assert parse_tag_list("a, a,a ,b") == ["a", "b"]

    def test_names_are_case_sensitive(self):
        from tag_list import parse_tag_list
        assert parse_tag_list("Batman, batman") == ["Batman", "batman"]


class TestSetTagList:
    """Tests for tag list synchronization against an in-memory store"""

    def test_creates_missing_tags(self, tag_store, article_factory):
        from tag_list import set_tag_list, tag_list

        article = article_factory()
        set_tag_list(article, "batman, comics", store=tag_store)

        assert tag_list(article) == "batman, comics"
        assert tag_store.created == ["batman", "comics"]

    def test_reuses_existing_tags(self, article_factory):
        from conftest import FakeTagStore
        from tag_list import set_tag_list

        store = FakeTagStore(["batman"])
        existing = store.tags["batman"]
        article = article_factory()
        set_tag_list(article, "batman", store=store)

        assert article.tags == [existing]
        assert store.created == []

    def test_repeated_name_resolves_once(self, tag_store, article_factory):
        from tag_list import set_tag_list

        article = article_factory()
        set_tag_list(article, "a, a, a", store=tag_store)

        assert [t.name for t in article.tags] == ["a"]
        assert tag_store.created == ["a"]

    def test_empty_text_clears_tags(self, tag_store, article_factory):
        from tag_list import set_tag_list

        article = article_factory()
        set_tag_list(article, "x, y", store=tag_store)
        set_tag_list(article, "", store=tag_store)

        assert article.tags == []

    def test_replaces_instead_of_merging(self, tag_store, article_factory):
        from tag_list import set_tag_list

        article = article_factory()
        set_tag_list(article, "a, b", store=tag_store)
        set_tag_list(article, "b, c", store=tag_store)

        assert {t.name for t in article.tags} == {"b", "c"}

    def test_store_errors_propagate(self, article_factory):
        from conftest import FakeTagStore
        from tag_list import set_tag_list

        class FailingStore(FakeTagStore):
            def create(self, name):
                raise RuntimeError("unique constraint failed")

        with pytest.raises(RuntimeError):
            set_tag_list(article_factory(), "new", store=FailingStore())

    @pytest.mark.parametrize("text", ["a,b", " a , b ", "b, a, ,", "a,,b,a", ",,,", "  "])
    def test_round_trip_yields_fragment_set(self, tag_store, article_factory, text):
        from tag_list import set_tag_list, tag_list

        article = article_factory()
        set_tag_list(article, text, store=tag_store)

        expected = {f.strip() for f in text.split(",") if f.strip()}
        actual = {name for name in tag_list(article).split(", ") if name}
        assert actual == expected


class TestTagListOnArticles:
    """Tests for the Article.tag_list property backed by the database"""

    def test_tag_list_property(self, app):
        from repositories.article_repository import ArticleRepository

        article = ArticleRepository.create(name="Batman", tag_list="batman,  comics ")
        assert set(article.tag_list.split(", ")) == {"batman", "comics"}

    def test_tags_are_shared_between_articles(self, app):
        from repositories.article_repository import ArticleRepository
        from repositories.tag_repository import TagRepository

        first = ArticleRepository.create(name="One", tag_list="batman")
        second = ArticleRepository.create(name="Two", tag_list="batman, robin")

        batman = TagRepository.find_by_name("batman")
        assert first.tags[0].id == batman.id
        assert batman.id in [t.id for t in second.tags]
        assert TagRepository.count() == 2

    def test_update_replaces_taggings(self, app):
        from db import db
        from models import Tagging
        from repositories.article_repository import ArticleRepository
        from repositories.tag_repository import TagRepository

        article = ArticleRepository.create(name="One", tag_list="a, b")
        ArticleRepository.update(article, tag_list="b, c")

        assert {t.name for t in article.tags} == {"b", "c"}
        assert db.session.query(Tagging).count() == 2
        # Orphaned tags are kept
        assert TagRepository.find_by_name("a") is not None

    def test_empty_tag_list_clears_taggings(self, app):
        from db import db
        from models import Tagging
        from repositories.article_repository import ArticleRepository

        article = ArticleRepository.create(name="One", tag_list="a, b")
        ArticleRepository.update(article, tag_list=" , ")

        assert article.tags == []
        assert db.session.query(Tagging).count() == 0

    def test_duplicate_names_tag_once(self, app):
        from db import db
        from models import Tagging
        from repositories.article_repository import ArticleRepository

        article = ArticleRepository.create(name="One", tag_list="a, a, a")

        assert [t.name for t in article.tags] == ["a"]
        assert db.session.query(Tagging).count() == 1
