import uuid
from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserBase(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    cellphone: str = Field(min_length=10, max_length=15)
    birthday: date | None = None
    cpf: str | None = Field(default=None, max_length=14)


class UserCreate(UserBase):
    pass


class UserUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    email: EmailStr | None = None
    cellphone: str | None = Field(default=None, min_length=10, max_length=15)
    birthday: date | None = None
    cpf: str | None = Field(default=None, max_length=14)


class User(BaseModel):
    id: uuid.UUID
    name: str
    email: str
    cellphone: str
    birthday: date | None = None
    cpf: str | None = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
