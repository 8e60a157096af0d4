import pytest
from pydantic import ValidationError

from app.core.exceptions import NotFoundError
from app.schemas.review import ReviewCreate, ReviewUpdate
from app.storage import FilmRepository, ReviewRepository
from tests.conftest import film_payload, user_payload


def review_payload(user_id, film_id, content="Slow but rewarding.", is_positive=True):
    return ReviewCreate(content=content, is_positive=is_positive, user_id=user_id, film_id=film_id)


@pytest.fixture
def review(db, make_film, make_user):
    author = make_user("author")
    film = make_film("Stalker")
    return ReviewRepository(db).save(review_payload(author.id, film.id))


def test_new_review_has_zero_useful(review):
    assert review.useful == 0
    assert review.is_positive is True


def test_like_and_dislike_change_useful(db, review, make_user):
    neo, trinity, smith = (make_user(login) for login in ("neo", "trinity", "smith"))
    repository = ReviewRepository(db)

    repository.add_vote(review.id, neo.id, True)
    repository.add_vote(review.id, trinity.id, True)
    repository.add_vote(review.id, smith.id, False)

    assert repository.find_by_id(review.id).useful == 1


def test_repeated_vote_is_idempotent(db, review, make_user):
    neo = make_user("neo")
    repository = ReviewRepository(db)

    assert repository.add_vote(review.id, neo.id, True) is True
    assert repository.add_vote(review.id, neo.id, True) is False
    assert repository.find_by_id(review.id).useful == 1


def test_opposite_vote_replaces_previous(db, review, make_user):
    neo = make_user("neo")
    repository = ReviewRepository(db)

    repository.add_vote(review.id, neo.id, True)
    repository.add_vote(review.id, neo.id, False)

    assert repository.find_by_id(review.id).useful == -1


def test_remove_vote_only_matching_kind(db, review, make_user):
    neo = make_user("neo")
    repository = ReviewRepository(db)
    repository.add_vote(review.id, neo.id, False)

    assert repository.remove_vote(review.id, neo.id, True) is False
    assert repository.find_by_id(review.id).useful == -1
    assert repository.remove_vote(review.id, neo.id, False) is True
    assert repository.find_by_id(review.id).useful == 0


def test_update_resets_votes(db, review, make_user):
    neo = make_user("neo")
    repository = ReviewRepository(db)
    repository.add_vote(review.id, neo.id, True)

    updated = repository.update(
        ReviewUpdate(
            id=review.id,
            content="Actually too slow.",
            is_positive=False,
            user_id=review.user_id,
            film_id=review.film_id,
        )
    )

    assert updated.content == "Actually too slow."
    assert updated.is_positive is False
    assert updated.useful == 0


def test_reviews_ordered_by_useful(db, make_film, make_user):
    author = make_user("author")
    voter = make_user("voter")
    stalker = make_film("Stalker")
    solaris = make_film("Solaris")
    repository = ReviewRepository(db)
    first = repository.save(review_payload(author.id, stalker.id, "First"))
    second = repository.save(review_payload(author.id, stalker.id, "Second"))
    other = repository.save(review_payload(author.id, solaris.id, "Other"))
    repository.add_vote(second.id, voter.id, True)
    repository.add_vote(other.id, voter.id, False)

    by_film = repository.find_all_by_film(stalker.id, 10)

    assert [item.id for item in by_film] == [second.id, first.id]
    assert [item.id for item in repository.find_all_by_film(None, 10)] == [second.id, first.id, other.id]
    assert [item.id for item in repository.find_all_by_film(None, 1)] == [second.id]


def test_deleting_film_removes_reviews(db, review):
    FilmRepository(db).delete(review.film_id)

    assert ReviewRepository(db).find_by_id(review.id) is None


def test_review_content_validation():
    with pytest.raises(ValidationError):
        review_payload(1, 1, content="  ")
    with pytest.raises(ValidationError):
        review_payload(1, 1, content="x" * 1001)


def test_service_requires_existing_film_and_user(review_service, user_service, film_service):
    author = user_service.save(user_payload("author"))
    film = film_service.save(film_payload("Stalker"))

    with pytest.raises(NotFoundError):
        review_service.save(review_payload(author.id, 999))
    with pytest.raises(NotFoundError):
        review_service.save(review_payload(999, film.id))
    with pytest.raises(NotFoundError):
        review_service.get_reviews(999, 10)

    review = review_service.save(review_payload(author.id, film.id))
    assert review_service.add_dislike(review.id, author.id).useful == -1
    assert review_service.remove_dislike(review.id, author.id).useful == 0
    with pytest.raises(NotFoundError):
        review_service.add_like(review.id, 999)

    review_service.remove_by_id(review.id)
    with pytest.raises(NotFoundError):
        review_service.get_by_id(review.id)
