from datetime import date

import pytest

from app.core.exceptions import MalformedAggregateError
from app.storage.aggregation import decode_array
from app.storage.row_mapping import AssociationArrays, FilmReconstructor, JoinedFilmRow, JoinedUserRow


def joined_row(**overrides):
    row = {
        "film_id": 1,
        "title": "Alien",
        "description": "In space no one can hear you scream.",
        "release_date": date(1979, 5, 25),
        "duration": 117,
        "mpa_id": 4,
        "mpa_name": "R",
        "genre_ids": "[null]",
        "genre_names": "[null]",
        "director_ids": "[null]",
        "director_names": "[null]",
        "like_ids": "[null]",
    }
    row.update(overrides)
    return row


def reconstruct(**overrides):
    return FilmReconstructor().reconstruct(JoinedFilmRow.from_mapping(joined_row(**overrides)))


def test_film_without_associations_has_empty_sets():
    film = reconstruct()

    assert film.id == 1
    assert film.mpa.id == 4
    assert film.mpa.name == "R"
    assert film.genres == set()
    assert film.directors == set()
    assert film.likes == set()


def test_cross_product_duplicates_collapse():
    # 장르 2개 x 좋아요 2개 조인 결과
    film = reconstruct(
        genre_ids="[1, 1, 2, 2]",
        genre_names='["Comedy", "Comedy", "Drama", "Drama"]',
        like_ids="[7, 8, 7, 8]",
    )

    assert film.genre_ids == {1, 2}
    assert {genre.name for genre in film.genres} == {"Comedy", "Drama"}
    assert film.likes == {7, 8}


def test_null_entries_are_skipped_alongside_values():
    film = reconstruct(director_ids="[3, null]", director_names='["Ridley Scott", null]')

    assert film.director_ids == {3}
    assert next(iter(film.directors)).name == "Ridley Scott"


def test_id_and_name_length_mismatch_is_malformed():
    with pytest.raises(MalformedAggregateError):
        reconstruct(genre_ids="[1, 2]", genre_names='["Comedy"]')
    with pytest.raises(MalformedAggregateError):
        reconstruct(genre_ids="[1, 2]", genre_names='["Comedy", "Drama", "Cartoon"]')


def test_reconstruction_ignores_array_order():
    first = reconstruct(
        genre_ids="[1, 2]", genre_names='["Comedy", "Drama"]', like_ids="[5, 3, 9]"
    )
    second = reconstruct(
        genre_ids="[2, 1]", genre_names='["Drama", "Comedy"]', like_ids="[9, 5, 3]"
    )

    assert first == second


def test_native_arrays_are_accepted():
    film = reconstruct(genre_ids=[6, None], genre_names=["Action", None], like_ids=[2])

    assert film.genre_ids == {6}
    assert film.likes == {2}


def test_user_row_friend_ids():
    row = JoinedUserRow.from_mapping(
        {
            "user_id": 1,
            "email": "neo@example.com",
            "login": "neo",
            "name": "Neo",
            "birthday": None,
            "friend_ids": "[3, 2, null]",
        }
    )

    user = FilmReconstructor().reconstruct_user(row)

    assert user.friends == {2, 3}
    assert user.model_dump(mode="json")["friends"] == [2, 3]


def test_decode_array():
    assert decode_array(None) == []
    assert decode_array("[1, 2]") == [1, 2]
    assert decode_array((1, 2)) == [1, 2]
    assert AssociationArrays(ids=[None]).id_values() == []
