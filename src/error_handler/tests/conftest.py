"""
Core pytest configuration for the test suite.

- installs the application logging once per session (same dictConfig as production)
- provides an in-memory SQLite database through SQLAlchemy, so database errors in
  the tests are the real driver / ORM exceptions the classifier sees in production
- provides a FastAPI app with error handling installed and a few failing routes
"""

from __future__ import annotations

import logging

# Silence chatty third-party loggers before anything imports them.
NOISY_LOGGERS = ("sqlalchemy", "sqlalchemy.engine", "asyncio", "httpx")
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

import pytest
from fastapi import FastAPI
from sqlalchemy import Column, Integer, String, create_engine, select
from sqlalchemy.orm import DeclarativeBase, Session
from sqlalchemy.pool import StaticPool
from starlette.testclient import TestClient

from error_handler.api import install_error_handling
from error_handler.config.settings import Settings
from error_handler.core.logging.builder import setup_logging
from error_handler.exceptions import bad_request_error, new_error, not_found_error


class Base(DeclarativeBase):
    pass


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    email = Column(String(255), unique=True, nullable=False)


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return Settings(ENV="testing", LOG_LEVEL="DEBUG", LOG_FORMAT="json", LOG_TO_STDOUT=True)


@pytest.fixture(scope="session", autouse=True)
def configure_logging(test_settings: Settings):
    """Install application logging for the whole session."""
    setup_logging(test_settings)


# -------------------------------
# Database
# -------------------------------

@pytest.fixture()
def db_session():
    """A fresh in-memory SQLite database with one row: accounts(id=1, email='taken@example.com')."""
    # StaticPool: sync routes run in a worker thread and must see the same in-memory database.
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add(Account(id=1, email="taken@example.com"))
        session.commit()
        yield session
    engine.dispose()


def insert_duplicate(session: Session) -> None:
    session.add(Account(email="taken@example.com"))
    session.flush()


def load_missing(session: Session) -> Account:
    return session.execute(select(Account).where(Account.id == 999)).scalar_one()


# -------------------------------
# Application
# -------------------------------

def build_app(settings: Settings, db_session: Session) -> FastAPI:
    app = FastAPI()
    install_error_handling(app, settings)

    @app.get("/ok")
    def ok():
        return {"ok": True}

    @app.get("/bad-request")
    def bad_request():
        raise bad_request_error("Invalid request")

    @app.get("/custom")
    def custom():
        raise new_error("Quota exhausted", 429)

    @app.get("/wrapped")
    def wrapped():
        try:
            {}["missing"]
        except KeyError as exc:
            raise not_found_error("Item not found") from exc

    @app.get("/duplicate")
    def duplicate():
        insert_duplicate(db_session)

    @app.get("/missing")
    def missing():
        load_missing(db_session)

    @app.get("/crash")
    def crash():
        return 1 / 0

    @app.get("/echo/{n}")
    async def echo(n: int):
        if n % 2:
            raise new_error(f"odd {n}", 409)
        return {"n": n}

    return app


@pytest.fixture()
def app_factory(db_session: Session):
    """Build the test app for other settings (e.g. plain-text error responses)."""
    return lambda settings: build_app(settings, db_session)


@pytest.fixture()
def app(test_settings: Settings, app_factory) -> FastAPI:
    return app_factory(test_settings)


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    # raise_server_exceptions=True: anything escaping the middleware would fail the test.
    return TestClient(app, raise_server_exceptions=True)
