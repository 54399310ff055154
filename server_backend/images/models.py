# images/models.py
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

UNKNOWN_CREATOR_NAME = "Unknown"


@dataclass(frozen=True)
class CallerId:
    """Opaque identity of whoever invoked an operation.

    Handed over by the hosting environment; compared and hashed, never parsed.
    """
    value: str

    def __str__(self):
        return self.value


ANONYMOUS = CallerId("anonymous")


@dataclass
class Image:
    id: int
    name: str
    creator: CallerId
    data: bytes

    def __str__(self):
        return f"Image {self.id} ({self.name})"


class ImageEntry(NamedTuple):
    id: int
    name: str
    creator_name: str
    data: bytes


class DeleteResult(str, Enum):
    SUCCESS = "Success"
    NOT_FOUND = "NotFound"
    NOT_AUTHORIZED = "NotAuthorized"
