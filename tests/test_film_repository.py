from datetime import date

from sqlalchemy import func, select

from app.models.film import FilmModel
from app.models.film_like import FilmLikeModel
from app.schemas.film import FilmUpdate
from app.schemas.genre import Genre, MpaRating
from app.schemas.search import DirectorSortKey, SearchCriteria
from app.storage import FilmRepository
from app.storage.aggregation import decode_array


def like(db, film, *users):
    repository = FilmRepository(db)
    for user in users:
        repository.add_like(film.id, user.id)


def ids(films):
    return [film.id for film in films]


def test_save_deduplicates_genres(db, make_film):
    film = make_film("Heat", genre_ids=(1, 1, 2))

    assert film.genre_ids == {1, 2}
    assert {genre.name for genre in film.genres} == {"Comedy", "Drama"}
    assert film.mpa.name == "G"


def test_save_and_find_round_trip(db, make_film, make_director):
    director = make_director("Michael Mann")
    film = make_film("Heat", genre_ids=(4,), director_ids=(director.id,), release_date=date(1995, 12, 15))

    found = FilmRepository(db).find_by_id(film.id)

    assert found == film
    assert found.release_date == date(1995, 12, 15)
    assert found.directors == {director}


def test_find_missing_film_returns_none(db):
    assert FilmRepository(db).find_by_id(404) is None


def test_update_replaces_associations(db, make_film):
    film = make_film("Heat", genre_ids=(1, 2))

    updated = FilmRepository(db).update(
        FilmUpdate(
            id=film.id,
            title="Heat (Director's Cut)",
            description=film.description,
            release_date=film.release_date,
            duration=170,
            mpa=MpaRating(id=4),
            genres=[Genre(id=3)],
        )
    )

    assert updated.title == "Heat (Director's Cut)"
    assert updated.genre_ids == {3}
    assert updated.mpa.name == "R"


def test_add_like_is_idempotent(db, make_film, make_user):
    film = make_film()
    user = make_user()

    like(db, film, user, user)

    assert FilmRepository(db).find_by_id(film.id).likes == {user.id}


def test_remove_missing_like_is_noop(db, make_film, make_user):
    film = make_film()
    user = make_user()

    assert FilmRepository(db).remove_like(film.id, user.id).likes == set()


def test_top_films_ordered_by_like_count(db, make_film, make_user):
    users = [make_user(f"user{i}") for i in range(4)]
    films = [make_film(f"Film {i}") for i in range(4)]
    for film, count in zip(films, [0, 3, 1, 4]):
        like(db, film, *users[:count])

    top = FilmRepository(db).get_top_films(10)

    assert ids(top) == [films[3].id, films[1].id, films[2].id, films[0].id]
    assert ids(FilmRepository(db).get_top_films(2)) == [films[3].id, films[1].id]


def test_top_films_tie_broken_by_id(db, make_film):
    first = make_film("First")
    second = make_film("Second")

    assert ids(FilmRepository(db).get_top_films(10)) == [first.id, second.id]


def test_top_films_filter_by_genre_keeps_count(db, make_film, make_user):
    user = make_user()
    popular_comedy = make_film("Popular comedy", genre_ids=(1,))
    drama = make_film("Drama", genre_ids=(2,))
    comedy = make_film("Comedy", genre_ids=(1, 2))
    like(db, popular_comedy, user)
    like(db, drama, user)

    top = FilmRepository(db).get_top_films(2, genre_id=1)

    assert ids(top) == [popular_comedy.id, comedy.id]
    # 필터 후에도 장르 집합은 온전히 유지
    assert top[1].genre_ids == {1, 2}


def test_top_films_filter_by_year(db, make_film):
    make_film("Old", release_date=date(1999, 12, 31))
    new = make_film("New", release_date=date(2000, 1, 1))

    assert ids(FilmRepository(db).get_top_films(10, year=2000)) == [new.id]
    assert FilmRepository(db).get_top_films(10, genre_id=1, year=2000) == []


def test_director_films_sorting(db, make_film, make_user, make_director):
    director = make_director("Ridley Scott")
    user = make_user()
    alien = make_film("Alien", release_date=date(1979, 5, 25), director_ids=(director.id,))
    gladiator = make_film("Gladiator", release_date=date(2000, 5, 1), director_ids=(director.id,))
    make_film("Unrelated")
    like(db, gladiator, user)

    repository = FilmRepository(db)

    assert ids(repository.get_director_films(director.id, DirectorSortKey.year)) == [alien.id, gladiator.id]
    assert ids(repository.get_director_films(director.id, DirectorSortKey.likes)) == [gladiator.id, alien.id]


def test_common_films_are_symmetric(db, make_film, make_user):
    neo = make_user("neo")
    trinity = make_user("trinity")
    films = [make_film(f"Film {i}") for i in range(3)]
    like(db, films[0], neo)
    like(db, films[1], neo, trinity)
    like(db, films[2], trinity)

    repository = FilmRepository(db)

    assert ids(repository.get_common_films(neo.id, trinity.id)) == [films[1].id]
    assert ids(repository.get_common_films(trinity.id, neo.id)) == [films[1].id]


def test_search_by_title_and_director(db, make_film, make_director, make_user):
    jackson = make_director("Peter Jackson")
    user = make_user()
    rings = make_film("The Lord of the Rings", director_ids=(jackson.id,))
    king_kong = make_film("King Kong", director_ids=(jackson.id,))
    make_film("Heat")
    like(db, king_kong, user)

    repository = FilmRepository(db)

    assert ids(repository.search_by("RING", [SearchCriteria.title])) == [rings.id]
    assert ids(repository.search_by("jack", [SearchCriteria.director])) == [king_kong.id, rings.id]
    assert ids(repository.search_by("kong", [SearchCriteria.title, SearchCriteria.director])) == [king_kong.id]
    assert repository.search_by("jack", [SearchCriteria.title]) == []


def test_search_treats_wildcards_literally(db, make_film):
    percent = make_film("100% Wolf")
    make_film("1000 Wolves")

    assert ids(FilmRepository(db).search_by("100%", [SearchCriteria.title])) == [percent.id]


def test_delete_film_cascades_likes(db, make_film, make_user):
    film = make_film()
    like(db, film, make_user())

    assert FilmRepository(db).delete(film.id) is True
    assert FilmRepository(db).find_by_id(film.id) is None
    assert db.execute(select(func.count()).select_from(FilmLikeModel)).scalar() == 0


def test_find_all_includes_films_without_associations(db, make_film, make_user):
    bare = make_film("Bare")
    rich = make_film("Rich", genre_ids=(1, 3))
    like(db, rich, make_user())

    films = FilmRepository(db).find_all()

    assert ids(films) == [bare.id, rich.id]
    assert films[0].genres == set()
    assert films[0].likes == set()


def test_top_films_for_last_supported_year(db, make_film):
    make_film("Old", release_date=date(1999, 12, 31))

    assert FilmRepository(db).get_top_films(10, year=9999) == []


def test_like_ids_are_not_repeated_per_genre(db, make_film, make_user, make_director):
    director = make_director()
    film = make_film("Heat", genre_ids=(1, 2, 3), director_ids=(director.id,))
    like(db, film, make_user("neo"), make_user("trinity"))
    repository = FilmRepository(db)

    row = db.execute(repository._joined_select().where(FilmModel.film_id == film.id)).mappings().first()

    assert sorted(decode_array(row["like_ids"])) == sorted(repository.find_by_id(film.id).likes)
    assert repository.find_by_id(film.id).genre_ids == {1, 2, 3}
