"""FastAPI dependency injection: app.state.container holds providers; Depends() resolves them.

One database session per request; services are built around it.
"""
from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Header, Request
from sqlmodel import Session

from finance_tracker.auth import AccessGuard, AuthenticationFlow, UserContext
from finance_tracker.container import Container
from finance_tracker.db.sessions import session_scope
from finance_tracker.services import (EarningService, ExpenseService,
                                      LookupService, SavingService,
                                      UserDirectory)


def get_container(request: Request) -> Container:
    """Resolve the DI container attached at app creation."""
    return request.app.state.container


ContainerDep = Annotated[Container, Depends(get_container)]


def get_session(container: ContainerDep) -> Generator[Session, None, None]:
    """Yield a session for the request; committed or rolled back on exit."""
    with session_scope(container.engine()) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_session)]


def get_user_directory(container: ContainerDep, session: SessionDep) -> UserDirectory:
    return container.user_directory(session)


UserDirectoryDep = Annotated[UserDirectory, Depends(get_user_directory)]


def get_access_guard(container: ContainerDep, users: UserDirectoryDep) -> AccessGuard:
    return container.access_guard(users=users)


def get_auth_flow(container: ContainerDep, users: UserDirectoryDep) -> AuthenticationFlow:
    return container.auth_flow(users=users)


def get_current_user(
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    authorization: Annotated[str | None, Header()] = None,
) -> UserContext:
    """Reject the request unless it carries a valid session token."""
    return guard.authenticate(authorization)


def get_optional_user(
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    authorization: Annotated[str | None, Header()] = None,
) -> UserContext | None:
    """Resolve the caller if possible; never rejects."""
    return guard.authenticate_optional(authorization)


def get_expense_service(container: ContainerDep, session: SessionDep) -> ExpenseService:
    return container.expense_service(session)


def get_earning_service(container: ContainerDep, session: SessionDep) -> EarningService:
    return container.earning_service(session)


def get_saving_service(container: ContainerDep, session: SessionDep) -> SavingService:
    return container.saving_service(session)


def get_category_service(container: ContainerDep, session: SessionDep) -> LookupService:
    return container.category_service(session)


def get_type_service(container: ContainerDep, session: SessionDep) -> LookupService:
    return container.type_service(session)


# Type aliases for route injection
AuthFlowDep = Annotated[AuthenticationFlow, Depends(get_auth_flow)]
CurrentUser = Annotated[UserContext, Depends(get_current_user)]
OptionalUser = Annotated[UserContext | None, Depends(get_optional_user)]
ExpenseServiceDep = Annotated[ExpenseService, Depends(get_expense_service)]
EarningServiceDep = Annotated[EarningService, Depends(get_earning_service)]
SavingServiceDep = Annotated[SavingService, Depends(get_saving_service)]
CategoryServiceDep = Annotated[LookupService, Depends(get_category_service)]
TypeServiceDep = Annotated[LookupService, Depends(get_type_service)]
