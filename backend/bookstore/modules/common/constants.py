"""Common constants used across the application."""

from typing import Callable, Dict, Type

from fastapi import HTTPException, status

from .exceptions import (
    DomainError,
    ResourceNotFoundError,
    StoreUnavailableError,
    ValidationError,
    WriteConflictError,
)

EXCEPTION_MAPPING: Dict[Type[DomainError], Callable[[str], HTTPException]] = {
    ResourceNotFoundError: lambda message: HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message),
    StoreUnavailableError: lambda message: HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message),
    ValidationError: lambda message: HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message),
    WriteConflictError: lambda message: HTTPException(status_code=status.HTTP_409_CONFLICT, detail=message),
}

DEFAULT_ORDER_COLUMN = "id"
