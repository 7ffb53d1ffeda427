"""
Pydantic schemas for the search API wire format.

These schemas define the API contract shared by the server and the
client. Field names on the wire are capitalized (``ID``, ``Name``, ...);
Python attributes stay snake_case through aliases.
No business logic belongs here.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserItem(BaseModel):
    """A single user in the search response array."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="ID")
    name: str = Field(..., alias="Name")
    age: int = Field(..., alias="Age")
    about: str = Field(..., alias="About")
    gender: str = Field(..., alias="Gender")


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    model_config = ConfigDict(populate_by_name=True)

    error: str = Field(..., alias="Error")


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
