from typing import Literal, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    username: str = Field(max_length=50)
    full_name: str = Field(max_length=100)
    email: Optional[str] = Field(default=None, max_length=100)
    role: Literal["faculty", "student", "admin"]


class UserCreate(UserBase):
    password: str = Field(min_length=1)


class UserRead(UserBase):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
