"""Pytest configuration and fixtures."""

import os
import sys
from contextlib import contextmanager
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Set test environment variables
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["REMOTE_URL"] = ""
os.environ["REMOTE_API_KEY"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

LETTERS = {"D": "A", "I": "B", "S": "C", "C": "D"}


@pytest.fixture
def make_answers():
    """Build answers whose traits follow the given counts, in D/I/S/C order."""
    from disc_profile.db.models import Answer, Trait

    def _make(**counts):
        answers = []
        for symbol in ("D", "I", "S", "C"):
            for _ in range(counts.get(symbol, 0)):
                answers.append(
                    Answer(
                        question_id=len(answers) + 1,
                        choice=LETTERS[symbol],
                        trait=Trait(symbol),
                        elapsed_seconds=1.0,
                    )
                )
        return answers

    return _make


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test."""
    from disc_profile.db.session import get_engine
    from sqlmodel import Session, SQLModel

    engine = get_engine()
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        yield session
        session.rollback()


@pytest.fixture(scope="function")
def repository(db_session):
    """Create a repository with test database session."""
    from disc_profile.db.repo import Repository
    return Repository(db_session)


@pytest.fixture
def session_factory(db_session):
    """Session factory that hands out the test session."""
    @contextmanager
    def factory():
        yield db_session
        db_session.flush()

    return factory


@pytest.fixture
def sample_respondent(repository):
    """Create a sample respondent for testing."""
    return repository.create_respondent("Ana Souza", "ana@example.com")
