import os

APP_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_DIR = os.environ.get('TAGBOARD_CONFIG_DIR', os.path.join(APP_DIR, 'config'))
DB_FILE = os.path.join(CONFIG_DIR, 'tagboard.db')
CONFIG_FILE = os.path.join(CONFIG_DIR, 'settings.yaml')
ALEMBIC_DIR = os.path.join(APP_DIR, 'migrations')
ALEMBIC_CONF = os.path.join(ALEMBIC_DIR, 'alembic.ini')
TEMPLATES_DIR = os.path.join(APP_DIR, 'templates')

TAGBOARD_DB = os.environ.get('TAGBOARD_DB', 'sqlite:///' + DB_FILE)

BUILD_VERSION = '20261019_1200'

# Size classes for the tag cloud, smallest first
TAG_CLOUD_CLASSES = ['css1', 'css2', 'css3', 'css4']

# Separator used when rendering a tag list back into text
TAG_LIST_SEPARATOR = ', '

# Form fields accepted when creating or updating an article
ARTICLE_PERMITTED_FIELDS = ['name', 'published_on', 'content', 'tag_list']

DEFAULT_SETTINGS = {
    "database": {
        "uri": TAGBOARD_DB,
    },
    "tag_cloud": {
        "classes": TAG_CLOUD_CLASSES,
    },
    "logging": {
        "level": "INFO",
    },
}
