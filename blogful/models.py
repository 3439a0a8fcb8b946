from sqlalchemy import Column, Text, DateTime, ForeignKey, Integer
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func
from datetime import datetime


Base = declarative_base()


class User(Base):
    __tablename__ = "blogful_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    fullname = Column(Text, nullable=False)
    username = Column(Text, nullable=False, unique=True)
    password = Column(Text, nullable=True)
    nickname = Column(Text, nullable=True)
    date_created = Column(DateTime, nullable=False, default=datetime.utcnow)

    articles = relationship("Article", back_populates="author_user", passive_deletes=True)


class Article(Base):
    __tablename__ = "blogful_articles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    style = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    date_published = Column(DateTime, nullable=False, server_default=func.now())
    author = Column(
        Integer, ForeignKey("blogful_users.id", ondelete="SET NULL"), nullable=True
    )

    author_user = relationship("User", back_populates="articles")
    comments = relationship(
        "Comment",
        back_populates="article",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Comment(Base):
    __tablename__ = "blogful_comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False)
    date_commented = Column(DateTime, nullable=False, default=datetime.utcnow)
    article_id = Column(
        Integer, ForeignKey("blogful_articles.id", ondelete="CASCADE"), nullable=False
    )
    user_id = Column(
        Integer, ForeignKey("blogful_users.id", ondelete="CASCADE"), nullable=False
    )

    article = relationship("Article", back_populates="comments")
    user = relationship("User")
