from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional


class UsernamePasswordInput(BaseModel):
    username: str
    email: str
    password: str


class UserRead(BaseModel):
    id: int
    username: str
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FieldError(BaseModel):
    field: str
    message: str


class UserResponse(BaseModel):
    errors: Optional[list[FieldError]] = None
    user: Optional[UserRead] = None

    @classmethod
    def error(cls, field: str, message: str) -> "UserResponse":
        return cls(errors=[FieldError(field=field, message=message)])
