# app/core/exceptions.py


class FilmorateError(Exception):
    """서비스 공통 예외"""


class NotFoundError(FilmorateError):
    """존재하지 않는 영화/사용자/감독 ID"""


class MalformedAggregateError(FilmorateError):
    """조인 결과의 ID 배열과 이름 배열 길이 불일치"""


class UnsupportedSortKeyError(FilmorateError):
    """지원하지 않는 정렬 기준"""


class InvalidCriteriaError(FilmorateError):
    """지원하지 않는 검색 조건"""


class InvalidOperationError(FilmorateError):
    """허용되지 않는 작업 (자기 자신 친구 추가 등)"""


class InvalidDataError(FilmorateError):
    """참조하는 장르/MPA/감독이 존재하지 않음"""


class InfrastructureError(FilmorateError):
    """저장소가 영향받은 행 없음 또는 생성 키 없음을 보고"""
