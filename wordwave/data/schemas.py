from dataclasses import dataclass
from typing import Any, Dict, Union

from pydantic import BaseModel, Field  # pylint: disable=no-name-in-module


class WordRecord(BaseModel):
    """A normalized word and the number of times it has been submitted."""

    id: str = Field(..., description="The normalized word.")
    count: int = Field(..., ge=0, description="Number of submissions.")

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "WordRecord":
        return cls(id=document["_id"], count=document["count"])


class WordSubmission(BaseModel):
    word: str = Field(..., description="The raw word as typed by the user.")


class CloudWord(BaseModel):
    word: str = Field(...)
    count: int = Field(...)
    size: float = Field(..., description="Font size for the cloud render.")


@dataclass(frozen=True)
class Found:
    record: WordRecord


@dataclass(frozen=True)
class Absent:
    pass


Lookup = Union[Found, Absent]
