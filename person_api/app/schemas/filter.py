"""
Query descriptor for filtered person listings.

A ``PersonFilter`` is built from the query string of
``GET /Person/Filter`` and lives for a single request.  A field left
out of the query string stays ``None``, which means "do not filter on
this" rather than zero or false.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PersonFilter(BaseModel):
    """Optional constraints narrowing a person listing."""

    name: Optional[str] = Field(None, description="Exact, case-sensitive name match")
    likes_chocolate: Optional[bool] = Field(
        None, alias="likesChocolate", description="Only people with this chocolate preference"
    )
    max_results: Optional[int] = Field(
        None, alias="maxResults", description="Return at most this many of the matches"
    )

    model_config = {
        "populate_by_name": True,
    }

    def is_empty(self) -> bool:
        """True when no constraint at all was supplied."""
        return self.name is None and self.likes_chocolate is None and self.max_results is None
