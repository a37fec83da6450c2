"""
Pytest fixtures and configuration for Tagboard tests
"""
import os
import sys
import tempfile
import pytest

# Keep settings.yaml and the secret key out of the source tree
os.environ.setdefault('TAGBOARD_CONFIG_DIR', tempfile.mkdtemp(prefix='tagboard-test-'))

# Add app directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'app')))


@pytest.fixture(scope='session')
def app_config():
    """App configuration overrides for tests"""
    return {
        'TESTING': True,
        'SECRET_KEY': 'test-secret-key',
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'TAG_CLOUD_CLASSES': ['css1', 'css2', 'css3', 'css4'],
    }


@pytest.fixture
def app(app_config):
    """Application on a fresh in-memory database"""
    from app import create_app
    from db import db

    _app = create_app(app_config)
    with _app.app_context():
        yield _app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Flask test client"""
    with app.test_client() as client:
        yield client


class FakeTag:
    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"FakeTag({self.name!r})"


class FakeArticle:
    def __init__(self, id=1, tags=None):
        self.id = id
        self.tags = list(tags or [])


class FakeTagStore:
    """In-memory tag store recording how often tags get created"""

    def __init__(self, names=()):
        self.tags = {name: FakeTag(name) for name in names}
        self.created = []

    def find_by_name(self, name):
        return self.tags.get(name)

    def create(self, name):
        tag = FakeTag(name)
        self.tags[name] = tag
        self.created.append(name)
        return tag

    def usage_counts(self):
        return []

    def set_article_tags(self, article, tags):
        article.tags = list(tags)


@pytest.fixture
def tag_store():
    return FakeTagStore()


@pytest.fixture
def article_factory():
    return FakeArticle


@pytest.fixture
def sample_articles(app):
    """Three articles sharing some tags: batman x3, comics x2, movies x1"""
    from repositories.article_repository import ArticleRepository

    return [
        ArticleRepository.create(name="Batman Begins", published_on="2005-06-15", content="Origins.", tag_list="batman, movies, comics"),
        ArticleRepository.create(name="The Dark Knight Returns", content="Frank Miller.", tag_list="batman, comics"),
        ArticleRepository.create(name="Gotham by Gaslight", tag_list="batman"),
    ]
