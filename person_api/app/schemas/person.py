"""
Pydantic models for person data.

``PersonBase`` holds the shared fields; ``PersonCreate`` is the POST
body (the ``id`` may be omitted and is then assigned by the server),
``PersonReplace`` is the PUT body (the full entity, ``id`` included)
and ``PersonRead`` is what the API returns.  JSON payloads use
camelCase (``likesChocolate``); Python code uses snake_case.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PersonBase(BaseModel):
    name: str = Field(..., examples=["Margaret Thatcher"])
    likes_chocolate: bool = Field(True, alias="likesChocolate", examples=[True])

    model_config = {
        "populate_by_name": True,
    }


class PersonCreate(PersonBase):
    """Schema for creating a person."""

    id: Optional[int] = Field(None, examples=[6])


class PersonReplace(PersonBase):
    """Schema for replacing a person with PUT.

    The whole entity is required; partial updates are not supported.
    """

    id: int = Field(..., examples=[5])


class PersonRead(PersonBase):
    """Schema for reading a person from the API."""

    id: int

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
