from datetime import date

import pytest
from pydantic import ValidationError

from app.core.exceptions import (
    InfrastructureError,
    InvalidCriteriaError,
    InvalidDataError,
    NotFoundError,
    UnsupportedSortKeyError,
)
from app.schemas.director import DirectorCreate
from app.schemas.genre import MpaRating
from app.schemas.search import SearchCriteria
from app.storage.film_repository import FilmRepository
from tests.conftest import film_payload, user_payload


def test_save_rejects_unknown_mpa(film_service):
    with pytest.raises(InvalidDataError):
        film_service.save(film_payload(mpa_id=99))


def test_save_rejects_unknown_genre(film_service):
    with pytest.raises(InvalidDataError):
        film_service.save(film_payload(genre_ids=(1, 77)))


def test_save_rejects_unknown_director(film_service):
    with pytest.raises(InvalidDataError):
        film_service.save(film_payload(director_ids=(5,)))


def test_update_missing_film(film_service):
    with pytest.raises(NotFoundError):
        film_service.update(film_payload(film_id=404))


def test_update_keeps_likes(film_service, user_service):
    film = film_service.save(film_payload("Heat", genre_ids=(1,)))
    user = user_service.save(user_payload("neo"))
    film_service.add_like(film.id, user.id)

    updated = film_service.update(film_payload("Heat", genre_ids=(2, 3), mpa_id=3, film_id=film.id))

    assert updated.genre_ids == {2, 3}
    assert updated.mpa == MpaRating(id=3, name="PG-13")
    assert updated.likes == {user.id}


def test_like_requires_existing_user_and_film(film_service, user_service):
    film = film_service.save(film_payload())
    user = user_service.save(user_payload())

    with pytest.raises(NotFoundError):
        film_service.add_like(film.id, 999)
    with pytest.raises(NotFoundError):
        film_service.add_like(999, user.id)


def test_remove_film(film_service):
    film = film_service.save(film_payload())

    film_service.remove_by_id(film.id)

    with pytest.raises(NotFoundError):
        film_service.get_by_id(film.id)
    with pytest.raises(NotFoundError):
        film_service.remove_by_id(film.id)


def test_top_films_unknown_genre(film_service):
    with pytest.raises(NotFoundError):
        film_service.get_top_films(10, genre_id=100)


def test_director_films_sort_key(film_service, reference_service):
    director = reference_service.save_director(DirectorCreate(name="Denis Villeneuve"))
    film_service.save(film_payload("Dune", director_ids=(director.id,)))

    with pytest.raises(UnsupportedSortKeyError):
        film_service.get_director_films(director.id, "rating")
    with pytest.raises(UnsupportedSortKeyError):
        film_service.get_director_films(director.id, "YEAR")
    with pytest.raises(NotFoundError):
        film_service.get_director_films(999, "year")
    assert len(film_service.get_director_films(director.id, "likes")) == 1


def test_search_criteria_parsing(film_service):
    film_service.save(film_payload("Dune"))

    assert SearchCriteria.parse_list("title, Director,title") == [
        SearchCriteria.title,
        SearchCriteria.director,
    ]
    with pytest.raises(InvalidCriteriaError):
        film_service.search("dune", "genre")
    with pytest.raises(InvalidCriteriaError):
        film_service.search("dune", " ")
    assert [film.title for film in film_service.search("dun", "title,director")] == ["Dune"]


def test_failed_save_is_rolled_back(film_service, reference_service, monkeypatch):
    director = reference_service.save_director(DirectorCreate(name="Denis Villeneuve"))

    def fail(self, film_id, director_ids):
        raise InfrastructureError("Data saving failed: no keys returned.")

    monkeypatch.setattr(FilmRepository, "_insert_directors", fail)

    with pytest.raises(InfrastructureError):
        film_service.save(film_payload("Dune", genre_ids=(1,), director_ids=(director.id,)))

    assert film_service.get_all() == []


def test_failed_update_is_rolled_back(film_service, reference_service, monkeypatch):
    director = reference_service.save_director(DirectorCreate(name="Denis Villeneuve"))
    film = film_service.save(film_payload("Dune", genre_ids=(1, 2), director_ids=(director.id,)))

    def fail(self, film_id, director_ids):
        raise InfrastructureError("Data saving failed: no keys returned.")

    monkeypatch.setattr(FilmRepository, "_insert_directors", fail)

    with pytest.raises(InfrastructureError):
        film_service.update(
            film_payload("Dune: Part Two", genre_ids=(3,), director_ids=(director.id,), film_id=film.id)
        )

    unchanged = film_service.get_by_id(film.id)
    assert unchanged.title == "Dune"
    assert unchanged.genre_ids == {1, 2}
    assert unchanged.director_ids == {director.id}


def test_film_validation():
    with pytest.raises(ValidationError):
        film_payload(release_date=date(1895, 12, 27))
    with pytest.raises(ValidationError):
        film_payload(description="x" * 201)
    with pytest.raises(ValidationError):
        film_payload(title="   ")
    with pytest.raises(ValidationError):
        film_payload(duration=0)

    assert film_payload(release_date=date(1895, 12, 28), description="x" * 200).title == "Film"
