"""Explicit handler outcomes and their translation to HTTP responses."""
from dataclasses import dataclass
from typing import Generic, TypeVar

from fastapi import Response, status
from fastapi.responses import PlainTextResponse

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    message: str
    error: Exception | None = None


Outcome = Success[T] | Failure


def describe_error(error: Exception) -> str:
    """Renders an error as 'ClassName: message' for embedding in failure messages."""
    return f"{type(error).__name__}: {error}"


def to_response(outcome: Outcome) -> T | Response:
    """
    Single translation point from a handler outcome to what the route returns.
    Every failure becomes a 404 plain-text response carrying the failure message.
    """
    if isinstance(outcome, Failure):
        return PlainTextResponse(outcome.message, status_code=status.HTTP_404_NOT_FOUND)
    return outcome.value
