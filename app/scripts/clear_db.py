import os
import sys

# Add the app directory to the path so we can import modules
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from db import db


def clear_db(app=None):
    """Drop and recreate every table. Articles, tags and taggings are lost."""
    if app is None:
        from app import create_app
        app = create_app()

    with app.app_context():
        db.session.remove()
        print("Dropping all tables...")
        db.drop_all()
        print("Recreating all tables...")
        db.create_all()
        print("Database cleared successfully!")


if __name__ == "__main__":
    clear_db()
