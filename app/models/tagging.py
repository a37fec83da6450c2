"""
Model: Tagging
Join record between one Article and one Tag
"""

from db import db, now_utc


class Tagging(db.Model):
    __tablename__ = "taggings"

    # Composite key: an article references a given tag at most once
    article_id = db.Column(db.Integer, db.ForeignKey("articles.id", ondelete="CASCADE"), primary_key=True)
    tag_id = db.Column(db.Integer, db.ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True, index=True)
    created_at = db.Column(db.DateTime, default=now_utc)

    def __repr__(self):
        return f"<Tagging article_id={self.article_id} tag_id={self.tag_id}>"
