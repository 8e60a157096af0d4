from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401
from app.database import Base, create_db_engine
from app.schemas.director import Director, DirectorCreate
from app.schemas.film import FilmCreate, FilmUpdate
from app.schemas.genre import Genre, MpaRating
from app.schemas.user import UserCreate
from app.services import FilmService, RecommendationService, ReferenceService, ReviewService, UserService
from app.storage import DirectorRepository, FilmRepository, UserRepository


@pytest.fixture
def engine():
    """테스트마다 새 인메모리 SQLite"""
    test_engine = create_db_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    ReferenceService(factory).seed_defaults()
    return factory


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def film_service(session_factory):
    return FilmService(session_factory)


@pytest.fixture
def user_service(session_factory):
    return UserService(session_factory)


@pytest.fixture
def recommendation_service(session_factory):
    return RecommendationService(session_factory)


@pytest.fixture
def reference_service(session_factory):
    return ReferenceService(session_factory)


@pytest.fixture
def review_service(session_factory):
    return ReviewService(session_factory)


def film_payload(
    title="Film",
    release_date=date(2000, 1, 1),
    mpa_id=1,
    genre_ids=(),
    director_ids=(),
    description=None,
    duration=120,
    film_id=None,
):
    """film_id 를 주면 FilmUpdate, 아니면 FilmCreate"""
    fields = dict(
        title=title,
        description=description if description is not None else f"{title} description",
        release_date=release_date,
        duration=duration,
        mpa=MpaRating(id=mpa_id),
        genres=[Genre(id=genre_id) for genre_id in genre_ids],
        directors=[Director(id=director_id) for director_id in director_ids],
    )
    if film_id is None:
        return FilmCreate(**fields)
    return FilmUpdate(id=film_id, **fields)


def user_payload(login="user", name=None):
    return UserCreate(email=f"{login}@example.com", login=login, name=name, birthday=date(1990, 5, 17))


@pytest.fixture
def make_film(db):
    """저장소로 영화를 바로 생성"""
    def _make(title="Film", **kwargs):
        return FilmRepository(db).save(film_payload(title, **kwargs))
    return _make


@pytest.fixture
def make_user(db):
    def _make(login="user", name=None):
        return UserRepository(db).save(user_payload(login, name))
    return _make


@pytest.fixture
def make_director(db):
    def _make(name="Director"):
        return DirectorRepository(db).save(DirectorCreate(name=name))
    return _make


@pytest.fixture
def client(session_factory):
    from app.main import app
    from app.api.v1.films import get_film_service
    from app.api.v1.genres import get_reference_service
    from app.api.v1.users import get_recommendation_service, get_user_service
    from app.api.v1.reviews import get_review_service

    app.dependency_overrides[get_film_service] = lambda: FilmService(session_factory)
    app.dependency_overrides[get_user_service] = lambda: UserService(session_factory)
    app.dependency_overrides[get_recommendation_service] = lambda: RecommendationService(session_factory)
    app.dependency_overrides[get_reference_service] = lambda: ReferenceService(session_factory)
    app.dependency_overrides[get_review_service] = lambda: ReviewService(session_factory)
    # lifespan 은 실행하지 않음 (전역 엔진을 건드리지 않도록)
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()
