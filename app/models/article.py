"""
Model: Article
"""

from db import db, now_utc


class Article(db.Model):
    __tablename__ = "articles"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    published_on = db.Column(db.Date)
    content = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=now_utc)
    updated_at = db.Column(db.DateTime, default=now_utc, onupdate=now_utc)

    tags = db.relationship(
        "Tag",
        secondary="taggings",
        backref=db.backref("articles", lazy="dynamic"),
    )

    @property
    def tag_list(self):
        """Comma separated names of the article's tags"""
        from tag_list import tag_list

        return tag_list(self)

    @tag_list.setter
    def tag_list(self, text):
        from tag_list import set_tag_list

        set_tag_list(self, text)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "published_on": self.published_on.isoformat() if self.published_on else None,
            "content": self.content,
            "tag_list": self.tag_list,
            "tags": [t.name for t in self.tags],
        }

    def __repr__(self):
        return f"<Article {self.id} {self.name!r}>"
