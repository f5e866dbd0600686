import os
from datetime import date

# 앱 모듈 import 전에 설정해야 파일 DB가 생기지 않음
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401
from app.database import Base, get_db, register_sqlite_functions
from app.schemas.director import DirectorCreate
from app.schemas.film import FilmCreate
from app.schemas.user import UserCreate
from app.services.director_service import DirectorService
from app.services.feed_service import FeedService
from app.services.film_service import FilmService
from app.services.genre_service import GenreService
from app.services.user_service import UserService


@pytest.fixture
def engine():
    """테스트마다 새로 만드는 in-memory SQLite"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    register_sqlite_functions(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    GenreService(session).seed_defaults()
    yield session
    session.close()


@pytest.fixture
def feed_service(db):
    return FeedService(db)


@pytest.fixture
def film_service(db, feed_service):
    return FilmService(db, feed_service)


@pytest.fixture
def user_service(db, feed_service):
    return UserService(db, feed_service)


@pytest.fixture
def director_service(db):
    return DirectorService(db)


@pytest.fixture
def genre_service(db):
    return GenreService(db)


@pytest.fixture
def make_user(user_service):
    counter = {"n": 0}

    def _make(login=None, **kwargs):
        counter["n"] += 1
        login = login or f"user{counter['n']}"
        data = UserCreate(
            email=kwargs.pop("email", f"{login}@example.com"),
            login=login,
            birthday=kwargs.pop("birthday", date(1990, 1, 1)),
            **kwargs,
        )
        return user_service.create_user(data)

    return _make


@pytest.fixture
def make_film(film_service):
    def _make(name="Film", release_date=date(2000, 1, 1), **kwargs):
        data = FilmCreate(
            name=name,
            description=kwargs.pop("description", f"{name} description"),
            release_date=release_date,
            duration=kwargs.pop("duration", 120),
            **kwargs,
        )
        return film_service.create_film(data)

    return _make


@pytest.fixture
def make_director(director_service):
    def _make(name="Director"):
        return director_service.create_director(DirectorCreate(name=name))

    return _make


@pytest.fixture
def like_film(film_service, make_user):
    """영화에 새 사용자 n명의 좋아요를 추가"""

    def _like(film, n):
        users = [make_user() for _ in range(n)]
        for user in users:
            film_service.add_like(film.film_id, user.user_id)
        return users

    return _like


@pytest.fixture
def client(db, session_factory):
    from app.main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
