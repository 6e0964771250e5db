"""Explicit operation results returned by the service layer.

Services never raise to the HTTP layer; they return either `Ok` or
`Failure`. `main._respond` turns these into HTTP responses using
`STATUS_CODES`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class ErrorKind(str, Enum):
    INVALID = "invalid"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    PERSISTENCE = "persistence"
    UNEXPECTED = "unexpected"


STATUS_CODES = {
    ErrorKind.INVALID: 400,
    ErrorKind.CONFLICT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.PERSISTENCE: 400,
    ErrorKind.UNEXPECTED: 500,
}


@dataclass
class Ok:
    """Successful outcome. `location` is set for newly created resources."""
    value: Any = None
    status_code: int = 200
    location: Optional[str] = None


@dataclass
class Failure:
    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]


Result = Union[Ok, Failure]


def created(value: Any, location: str) -> Ok:
    return Ok(value=value, status_code=201, location=location)


def invalid(message: str) -> Failure:
    return Failure(ErrorKind.INVALID, message)


def conflict(message: str) -> Failure:
    return Failure(ErrorKind.CONFLICT, message)


def not_found(message: str) -> Failure:
    return Failure(ErrorKind.NOT_FOUND, message)


def persistence_failed(message: str) -> Failure:
    return Failure(ErrorKind.PERSISTENCE, message)


def unexpected(message: str) -> Failure:
    return Failure(ErrorKind.UNEXPECTED, message)
