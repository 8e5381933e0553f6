"""Login request and user summary schemas."""
import re
from datetime import datetime

from pydantic import AliasChoices, Field, field_validator

from finance_tracker.db import LoginMedium, User
from finance_tracker.schemas.common import ApiModel

EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")


class UserInfo(ApiModel):
    """Profile the client got from the identity provider. Both fields are checked by the login flow."""

    name: str | None = None
    email: str | None = None

    @field_validator("email")
    @classmethod
    def _valid_email(cls, v: str | None) -> str | None:
        # Blank emails are reported by the login flow as missing, not malformed.
        if v is not None and v.strip() and not EMAIL_PATTERN.match(v.strip()):
            raise ValueError("Please provide a valid email address")
        return v


class LoginRequest(ApiModel):
    firebase_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("firebaseToken", "externalToken", "firebase_token"),
    )
    user: UserInfo | None = None


class UserSummary(ApiModel):
    user_id: int = Field(alias="userId")
    name: str
    email: str
    login_medium: LoginMedium = Field(alias="loginMedium")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            user_id=user.id,
            name=user.name,
            email=user.email,
            login_medium=user.login_medium,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class LoginData(ApiModel):
    token: str
    user: UserSummary


class UserData(ApiModel):
    user: UserSummary
