import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from movie_catalog.db.database import enable_sqlite_foreign_keys
from movie_catalog.db.models import Base, MovieORM, UserORM, CopyORM
from movie_catalog.domain.models import Condition, Copy, Medium, Movie, User
from movie_catalog.repositories.implementation.sql_alchemy_copy_repo import SQLAlchemyCopyRepo
from movie_catalog.exceptions.repository import InvalidEntityDataException


@pytest.fixture
def session_factory():
    """Create a fresh in-memory SQLite database shared by every unit of work."""
    engine = enable_sqlite_foreign_keys(create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    ))
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def copy_repo(session_factory):
    """Create a copy repository instance."""
    return SQLAlchemyCopyRepo(session_factory)


@pytest.fixture
def test_data(session_factory):
    """Create two users, two movies and copies interleaved between owners."""
    with session_factory() as session:
        session.add_all([
            UserORM(id=1, username="alice", password="pw1"),
            UserORM(id=2, username="bob", password="pw2"),
            MovieORM(id=1, title="Matrix", genre="Ciencia ficción", year=1999),
            MovieORM(id=2, title="El Padrino", genre="Drama", year=1972),
        ])
        session.flush()
        session.add_all([
            CopyORM(id=1, movie_id=1, user_id=1, condition=Condition.NUEVA, medium=Medium.DVD),
            CopyORM(id=2, movie_id=2, user_id=2, condition=Condition.BUENA, medium=Medium.VHS),
            CopyORM(id=3, movie_id=2, user_id=1, condition=Condition.USADA, medium=Medium.BLU_RAY),
            CopyORM(id=4, movie_id=1, user_id=2, condition=Condition.DETERIORADA, medium=Medium.DVD),
        ])
        session.commit()

    return {
        "alice": User(id=1, username="alice", password="pw1"),
        "bob": User(id=2, username="bob", password="pw2"),
        "matrix": Movie(id=1, title="Matrix", genre="Ciencia ficción", year=1999),
    }


def test_find_by_id_loads_movie_snapshot(copy_repo, test_data):
    copy = copy_repo.find_by_id(3)
    assert copy.movie_id == 2
    assert copy.user_id == 1
    assert copy.condition is Condition.USADA
    assert copy.medium is Medium.BLU_RAY
    assert copy.movie is not None
    assert copy.movie.title == "El Padrino"


def test_find_by_owner_returns_only_owned_copies(copy_repo, test_data):
    """Test that the owner filter returns exactly the user's copies."""
    alice_copies = copy_repo.find_by_owner(test_data["alice"])
    bob_copies = copy_repo.find_by_owner(test_data["bob"])

    assert {c.id for c in alice_copies} == {1, 3}
    assert {c.id for c in bob_copies} == {2, 4}
    assert all(c.user_id == 1 for c in alice_copies)


def test_find_by_owner_without_copies(copy_repo, test_data):
    assert copy_repo.find_by_owner(User(id=99, username="nobody", password="x")) == []


def test_find_by_movie(copy_repo, test_data):
    copies = copy_repo.find_by_movie(test_data["matrix"])
    assert {c.id for c in copies} == {1, 4}


def test_save_new_copy(copy_repo, test_data):
    saved = copy_repo.save(Copy(movie_id=1, user_id=1, condition=Condition.BUENA, medium=Medium.VHS))
    assert saved.id not in (1, 2, 3, 4)
    assert saved.movie.title == "Matrix"
    assert len(copy_repo.find_by_owner(test_data["alice"])) == 3


def test_save_accepts_labels(copy_repo, test_data):
    saved = copy_repo.save(Copy(movie_id=2, user_id=2, condition="Nueva", medium="Blu-ray"))
    stored = copy_repo.find_by_id(saved.id)
    assert stored.condition is Condition.NUEVA
    assert stored.medium is Medium.BLU_RAY


def test_save_updates_existing_copy(copy_repo, test_data):
    copy = copy_repo.find_by_id(1)
    copy.condition = Condition.DETERIORADA
    copy.medium = Medium.BLU_RAY

    updated = copy_repo.save(copy)
    assert updated.id == 1
    stored = copy_repo.find_by_id(1)
    assert stored.condition is Condition.DETERIORADA
    assert stored.medium is Medium.BLU_RAY
    assert copy_repo.count() == 4


def test_save_without_movie(copy_repo, test_data):
    with pytest.raises(InvalidEntityDataException):
        copy_repo.save(Copy(movie_id=None, user_id=1, condition=Condition.NUEVA, medium=Medium.DVD))
    assert copy_repo.count() == 4


def test_save_without_owner(copy_repo, test_data):
    with pytest.raises(InvalidEntityDataException):
        copy_repo.save(Copy(movie_id=1, user_id=None, condition=Condition.NUEVA, medium=Medium.DVD))


def test_save_unknown_condition(copy_repo, test_data):
    with pytest.raises(InvalidEntityDataException):
        copy_repo.save(Copy(movie_id=1, user_id=1, condition="Rayada", medium=Medium.DVD))


def test_delete_then_find(copy_repo, test_data):
    """Test that a deleted copy is gone and the owner listing reflects it."""
    removed = copy_repo.delete(copy_repo.find_by_id(1))
    assert removed.id == 1
    assert copy_repo.find_by_id(1) is None
    assert {c.id for c in copy_repo.find_by_owner(test_data["alice"])} == {3}


def test_delete_unknown_copy(copy_repo, test_data):
    ghost = Copy(id=42, movie_id=1, user_id=1, condition=Condition.NUEVA, medium=Medium.DVD)
    assert copy_repo.delete(ghost) is None
    assert copy_repo.delete_by_id(42) is None
    assert copy_repo.count() == 4


def test_delete_unsaved_copy(copy_repo, test_data):
    unsaved = Copy(movie_id=1, user_id=1, condition=Condition.NUEVA, medium=Medium.DVD)
    assert copy_repo.delete(unsaved) is None


def test_find_all_and_count(copy_repo, test_data):
    assert len(copy_repo.find_all()) == 4
    assert copy_repo.count() == 4


def test_save_with_unknown_movie(copy_repo, test_data):
    """Test that a copy pointing at a missing movie is rejected by the store."""
    with pytest.raises(InvalidEntityDataException):
        copy_repo.save(Copy(movie_id=999, user_id=1, condition=Condition.NUEVA, medium=Medium.DVD))
    assert copy_repo.count() == 4


def test_save_with_unknown_owner(copy_repo, test_data):
    with pytest.raises(InvalidEntityDataException):
        copy_repo.save(Copy(movie_id=1, user_id=999, condition=Condition.NUEVA, medium=Medium.DVD))
    assert copy_repo.count() == 4


def test_repr_with_labels():
    copy = Copy(movie_id=1, user_id=1, condition="Nueva", medium="DVD")
    assert "condition='Nueva'" in repr(copy)
    assert "medium='DVD'" in repr(copy)
