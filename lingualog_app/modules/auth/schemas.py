from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _require_text(value: str) -> str:
    if value is None or not value.strip():
        raise ValueError('must not be blank')
    return value


class SignupRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')

    username: str
    password: str
    forgot_question: str
    forgot_answer: str

    @field_validator('username', 'forgot_question', 'forgot_answer', 'password')
    @classmethod
    def not_blank(cls, value):
        return _require_text(value)

    @field_validator('username', 'forgot_question')
    @classmethod
    def strip(cls, value):
        return value.strip()


class LoginRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')

    username: str
    password: str

    @field_validator('username', 'password')
    @classmethod
    def not_blank(cls, value):
        return _require_text(value)

    @field_validator('username')
    @classmethod
    def strip(cls, value):
        # Signup stores the stripped username.
        return value.strip()


class VerifyRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')

    token: Optional[str] = None


class ForgotPasswordRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')

    username: str
    forgot_answer: Optional[str] = None

    @field_validator('username')
    @classmethod
    def not_blank(cls, value):
        return _require_text(value).strip()


class ResetPasswordRequest(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    user_id: int = Field(alias='userId', gt=0)
    new_password: str = Field(alias='newPassword')
    reset_token: Optional[str] = Field(default=None, alias='resetToken')

    @field_validator('new_password')
    @classmethod
    def not_blank(cls, value):
        return _require_text(value)

    @field_validator('reset_token')
    @classmethod
    def empty_to_none(cls, value):
        return value or None
