from sqlalchemy import Column, Integer, SmallInteger, String, Boolean, Text, ForeignKey, Enum
from sqlalchemy.orm import relationship

from movie_catalog.db.database import Base
from movie_catalog.domain.models import Condition, Medium


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class UserORM(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)

    copies = relationship("CopyORM", back_populates="user", cascade="all, delete-orphan")


class MovieORM(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    genre = Column(String, nullable=False)
    year = Column(SmallInteger, nullable=False)
    description = Column(Text)
    director = Column(String)

    copies = relationship("CopyORM", back_populates="movie", cascade="all, delete-orphan")


class CopyORM(Base):
    __tablename__ = "copies"

    id = Column(Integer, primary_key=True, index=True)
    movie_id = Column(Integer, ForeignKey("movies.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    condition = Column(Enum(Condition, values_callable=_enum_values, name="copy_condition"), nullable=False)
    medium = Column(Enum(Medium, values_callable=_enum_values, name="copy_medium"), nullable=False)

    user = relationship("UserORM", back_populates="copies")
    movie = relationship("MovieORM", back_populates="copies", lazy="joined")
