"""Result-level error kinds returned by the service surface."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NotFound:
    """No house exists for the requested id."""

    msg: str


@dataclass(frozen=True)
class InvalidState:
    """The mutation was rejected before anything changed."""

    msg: str


Error = NotFound | InvalidState
