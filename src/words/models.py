"""Data models for word construction and dictionary loading."""

from typing import Dict, List, Optional, Literal
from pydantic import BaseModel, ConfigDict


WILDCARD = "*"

# Tile symbol -> count. Symbols with a count of zero are removed, never kept at 0.
TileMultiset = Dict[str, int]

# Concrete tiles (letters or WILDCARD) used to spell a word, one per position.
WordAssignment = List[str]

Status = Literal["success", "error"]


class DictionaryResult(BaseModel):
    """Tagged outcome of a dictionary load."""
    model_config = ConfigDict(frozen=True)

    status: Status
    message: str
    error: Optional[str] = None
    data: Optional[List[str]] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @classmethod
    def success(cls, words: List[str]) -> "DictionaryResult":
        return cls(status="success", message="fetch successful", data=words)

    @classmethod
    def failure(cls, error: Exception) -> "DictionaryResult":
        return cls(status="error", message="fetch failed", error=f"{type(error).__name__}: {error}")
