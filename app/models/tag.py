"""
Model: Tag
Tags are global: every article naming "batman" shares one row.
"""

from sqlalchemy.orm import validates
from db import db, now_utc


class Tag(db.Model):
    __tablename__ = "tags"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), unique=True, nullable=False)
    created_at = db.Column(db.DateTime, default=now_utc)

    @validates("name")
    def validate_name(self, key, name):
        from exceptions import ValidationException

        name = (name or "").strip()
        if not name:
            raise ValidationException("Tag name can't be blank")
        return name

    def __repr__(self):
        return f"<Tag {self.name!r}>"
