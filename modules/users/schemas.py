from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from modules.accounts.schemas import Email, Name, Password, Username

Role = Literal["user", "master"]


class CreateUserRequest(BaseModel):
    username: Username
    password: Password
    name: Name
    email: Email
    role: Role = "user"


class UpdateUserRequest(BaseModel):
    # username is immutable; sending it is a validation error
    model_config = ConfigDict(extra="forbid")

    name: Optional[Name] = None
    email: Optional[Email] = None
    role: Optional[Role] = None
    password: Optional[Password] = None
