"""Request bodies for the accounts endpoints."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=255)]
Password = Annotated[str, StringConstraints(min_length=6, max_length=255)]
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
Email = Annotated[str, StringConstraints(strip_whitespace=True, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")]


class RegisterRequest(BaseModel):
    # role is not accepted here: self-registration always yields a plain user
    model_config = ConfigDict(extra="ignore")

    username: Username
    password: Password
    name: Name
    email: Email


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
