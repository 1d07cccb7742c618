"""
Pydantic schemas for the account API request/response bodies.

The wire format uses camelCase for the password hash
(passwordHash); everything else matches the entity fields.
No business logic belongs here.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AccountPayload(BaseModel):
    """Request body for create, update and partial update.

    Every field is optional at the decoding stage; which ones are
    required depends on the operation. null is read as empty and
    unknown fields are ignored. The id is accepted but never used.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = ""
    email: str = ""
    username: str = ""
    password_hash: str = Field(default="", alias="passwordHash")

    @field_validator("id", "email", "username", "password_hash", mode="before")
    @classmethod
    def null_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class AccountResponse(BaseModel):
    """A stored account as returned by get and list."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    email: str
    username: str
    password_hash: str = Field(alias="passwordHash")


class CreateAccountResponse(BaseModel):
    """Response body for a successful create."""

    id: str
