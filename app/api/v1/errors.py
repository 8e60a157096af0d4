# app/api/v1/errors.py

import logging
from fastapi import HTTPException, status
from app.core.exceptions import (
    FilmorateError,
    NotFoundError,
    UnsupportedSortKeyError,
    InvalidCriteriaError,
    InvalidOperationError,
    InvalidDataError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    UnsupportedSortKeyError: status.HTTP_400_BAD_REQUEST,
    InvalidCriteriaError: status.HTTP_400_BAD_REQUEST,
    InvalidOperationError: status.HTTP_400_BAD_REQUEST,
    InvalidDataError: status.HTTP_400_BAD_REQUEST,
}


def to_http_exception(error: FilmorateError) -> HTTPException:
    """서비스 예외를 HTTP 응답 코드로 변환"""
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    logger.error("Request failed: %s", error)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
