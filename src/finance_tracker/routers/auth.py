"""Login, current user and logout.

Logout is an acknowledgement only: sessions are stateless, so the client
forgets its token.
"""
from fastapi import APIRouter

from finance_tracker.core.exceptions import UserNotFound
from finance_tracker.deps import AuthFlowDep, CurrentUser, UserDirectoryDep
from finance_tracker.schemas import (ApiResponse, LoginData, LoginRequest,
                                     UserData, UserSummary)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("", response_model=ApiResponse[LoginData], response_model_exclude_none=True)
def login(body: LoginRequest, flow: AuthFlowDep) -> ApiResponse[LoginData]:
    """Exchange a Firebase ID token for a session token, creating the user on first login."""
    result = flow.login(body.firebase_token, body.user)
    return ApiResponse(
        message=result.message,
        data=LoginData(token=result.token, user=UserSummary.from_user(result.user)),
    )


@router.get("/me", response_model=ApiResponse[UserData], response_model_exclude_none=True)
def get_current_user(current: CurrentUser, users: UserDirectoryDep) -> ApiResponse[UserData]:
    """Return the authenticated user's summary."""
    user = users.get(current.user_id)
    if user is None:
        raise UserNotFound()
    return ApiResponse(data=UserData(user=UserSummary.from_user(user)))


@router.post("/logout", response_model=ApiResponse, response_model_exclude_none=True)
def logout(current: CurrentUser) -> ApiResponse:
    return ApiResponse(message="Logout successful")
