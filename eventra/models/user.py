# eventra/models/user.py
from pydantic import BaseModel, EmailStr, Field, TypeAdapter, ValidationError, field_validator

email_adapter = TypeAdapter(EmailStr)


class UserBase(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr


class UserCreate(UserBase):
    password: str = Field(min_length=1)


class User(UserBase):
    id: str


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        # Match the form stored at registration; unparseable input is looked up as-is
        try:
            return email_adapter.validate_python(v)
        except ValidationError:
            return v


class TokenData(BaseModel):
    id: str
    email: str
