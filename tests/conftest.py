import pytest
from sqlalchemy.pool import StaticPool

from lightbnb.database.init import Database


# ---------- TEST FIXTURES ----------

# Use in-memory SQLite for test isolation
TEST_DATABASE_URL = "sqlite://"


def make_database() -> Database:
    return Database(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture(scope="function")
def database():
    db = make_database().open()
    db.create_all()
    yield db
    db.drop_all()
    db.close()


@pytest.fixture(scope="function")
def db_session(database):
    """A new DB session on a fresh schema for each test."""
    with database.session() as session:
        yield session


@pytest.fixture(scope="function")
def broken_session():
    """A session on a database whose tables were never created."""
    db = make_database().open()
    with db.session() as session:
        yield session
    db.close()
