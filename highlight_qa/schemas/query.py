from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class QueryRequest(BaseModel):
    text: str = Field(..., description="Highlighted text to ask about. Passed through as-is.")


class QueryResponse(BaseModel):
    """
    Wire shape of a /query reply. Exactly one of the fields is present.
    """

    response: Optional[str] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class AdapterResult:
    """Normalized outcome of one dispatch: an answer or an error message."""

    response: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, response: str) -> "AdapterResult":
        return cls(response=response)

    @classmethod
    def failed(cls, error: str) -> "AdapterResult":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def to_payload(self) -> Dict[str, Any]:
        return QueryResponse(response=self.response, error=self.error).model_dump(exclude_none=True)
