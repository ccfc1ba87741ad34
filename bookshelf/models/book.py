from bookshelf import db
from bookshelf.models import utcnow


class Book(db.Model):
    __tablename__ = "Booklist"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=True)
    author = db.Column(db.String(255), nullable=True)
    publisher = db.Column(db.String(255), nullable=True)
    year = db.Column(db.Integer, nullable=True)
    cover_url = db.Column(db.Text, nullable=True)
    file_url = db.Column(db.Text, nullable=True)
    description = db.Column(db.Text, nullable=True)
    tags = db.Column(db.Text, nullable=True)
    user_id = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "publisher": self.publisher,
            "year": self.year,
            "cover_url": self.cover_url,
            "file_url": self.file_url,
            "description": self.description,
            "tags": self.tags,
            "user_id": self.user_id,
        }
