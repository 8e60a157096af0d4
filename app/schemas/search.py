# app/schemas/search.py

from typing import List
from enum import Enum
from app.core.exceptions import InvalidCriteriaError, UnsupportedSortKeyError


class SearchCriteria(str, Enum):
    title = "title"
    director = "director"

    @classmethod
    def from_string(cls, value: str) -> "SearchCriteria":
        normalized = (value or "").strip().lower()
        for criteria in cls:
            if criteria.value == normalized:
                return criteria
        raise InvalidCriteriaError(f"Invalid search criteria: {value!r}")

    @classmethod
    def parse_list(cls, by: str) -> List["SearchCriteria"]:
        """콤마로 구분된 검색 조건 파싱 (중복 제거, 순서 유지)"""
        if by is None or not by.strip():
            raise InvalidCriteriaError("Search criteria should not be empty.")
        parsed: List[SearchCriteria] = []
        for token in by.split(","):
            criteria = cls.from_string(token)
            if criteria not in parsed:
                parsed.append(criteria)
        return parsed


class DirectorSortKey(str, Enum):
    likes = "likes"
    year = "year"

    @classmethod
    def from_string(cls, value: str) -> "DirectorSortKey":
        for key in cls:
            if key.value == value:
                return key
        raise UnsupportedSortKeyError(f"Sorted by {value!r} not exist")
