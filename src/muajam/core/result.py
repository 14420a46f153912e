"""
Explicit results for pipeline operations.

Ok(value) on success, Err(error) otherwise, where error is one of:
  ValidationFailure - entry rejected before any write
  StoreWriteError   - the lexicon store refused or failed a write
  NotFound          - content identifier has nothing stored
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ValidationError(str, Enum):
    POS_BLANK = "Part of Speech cannot be blank"
    POS_INVALID = "Invalid part of speech"
    PAST_BLANK = "Past tense cannot be blank"
    PRESENT_BLANK = "Present tense cannot be blank"
    PAST_NOT_ARABIC = "Past tense must be in Arabic"
    PRESENT_NOT_ARABIC = "Present tense must be in Arabic"
    PRESENT_PREFIX = "Present tense must start with ي"
    WORD_BLANK = "Word cannot be blank"
    WORD_NOT_ARABIC = "Word must be in Arabic"
    DEFINITION_BLANK = "Definition cannot be blank"


class StoreWriteError(Exception):
    """Raised by a lexicon store when an add/update/delete cannot be applied."""


@dataclass(frozen=True)
class ValidationFailure:
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def messages(self) -> list[str]:
        return [e.value for e in self.errors]


@dataclass(frozen=True)
class NotFound:
    identifier: str

    def __str__(self) -> str:
        return f"Content ID {self.identifier} is not found"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: Any  # ValidationFailure | StoreWriteError | NotFound

    @property
    def ok(self) -> bool:
        return False


Result = Ok | Err
