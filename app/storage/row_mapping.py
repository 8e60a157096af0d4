# app/storage/row_mapping.py
"""
Flattened join rows and the reconstruction of aggregates from them.

A film read is one grouped LEFT JOIN: the film columns plus, per association,
parallel arrays of ids and names. A missing association shows up as a single
NULL placeholder, and the cross product of the joins repeats entries, so the
arrays are filtered and collapsed into sets here. Nothing outside this module
depends on that row shape.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple
from app.core.exceptions import MalformedAggregateError
from app.schemas.director import Director
from app.schemas.film import Film
from app.schemas.genre import Genre, MpaRating
from app.schemas.user import User
from app.storage.aggregation import decode_array


@dataclass(frozen=True)
class AssociationArrays:
    """연관 관계 하나에 대한 병렬 배열 (ID, 이름)"""

    ids: Sequence[Any] = ()
    names: Optional[Sequence[Any]] = None

    def id_values(self) -> List[int]:
        return [int(value) for value in self.ids if value is not None]

    def pairs(self, association: str) -> List[Tuple[int, str]]:
        ids = self.id_values()
        names = [str(value) for value in (self.names or ()) if value is not None]
        if len(ids) != len(names):
            raise MalformedAggregateError(
                f"The number of {association} ids ({len(ids)}) and names ({len(names)}) differ."
            )
        return list(zip(ids, names))


@dataclass(frozen=True)
class JoinedFilmRow:
    film_id: int
    title: str
    description: Optional[str]
    release_date: date
    duration: int
    mpa_id: int
    mpa_name: Optional[str]
    genres: AssociationArrays
    directors: AssociationArrays
    likes: AssociationArrays

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "JoinedFilmRow":
        return cls(
            film_id=row["film_id"],
            title=row["title"],
            description=row["description"],
            release_date=row["release_date"],
            duration=row["duration"],
            mpa_id=row["mpa_id"],
            mpa_name=row["mpa_name"],
            genres=AssociationArrays(
                ids=decode_array(row["genre_ids"]), names=decode_array(row["genre_names"])
            ),
            directors=AssociationArrays(
                ids=decode_array(row["director_ids"]), names=decode_array(row["director_names"])
            ),
            likes=AssociationArrays(ids=decode_array(row["like_ids"])),
        )


@dataclass(frozen=True)
class JoinedUserRow:
    user_id: int
    email: str
    login: str
    name: str
    birthday: Optional[date]
    friends: AssociationArrays

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "JoinedUserRow":
        return cls(
            user_id=row["user_id"],
            email=row["email"],
            login=row["login"],
            name=row["name"],
            birthday=row["birthday"],
            friends=AssociationArrays(ids=decode_array(row["friend_ids"])),
        )


class FilmReconstructor:
    """조인 결과 행을 영화/사용자 애그리거트로 변환 (부수 효과 없음)"""

    def reconstruct(self, row: JoinedFilmRow) -> Film:
        genres = {Genre(id=genre_id, name=name) for genre_id, name in row.genres.pairs("genre")}
        directors = {
            Director(id=director_id, name=name)
            for director_id, name in row.directors.pairs("director")
        }
        return Film(
            id=row.film_id,
            title=row.title,
            description=row.description,
            release_date=row.release_date,
            duration=row.duration,
            mpa=MpaRating(id=row.mpa_id, name=row.mpa_name),
            genres=genres,
            directors=directors,
            likes=set(row.likes.id_values()),
        )

    def reconstruct_many(self, rows: Iterable[JoinedFilmRow]) -> List[Film]:
        return [self.reconstruct(row) for row in rows]

    def reconstruct_user(self, row: JoinedUserRow) -> User:
        return User(
            id=row.user_id,
            email=row.email,
            login=row.login,
            name=row.name,
            birthday=row.birthday,
            friends=set(row.friends.id_values()),
        )
