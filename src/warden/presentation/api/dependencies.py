"""FastAPI dependency injection for the Warden API.

Provides dependencies for:
- The application container
- The authenticated principal
- Command and query instances
"""

from typing import Annotated

from fastapi import Depends, Request

from warden.application.commands import (
    CreateUserCommand,
    IssueTokenCommand,
    SignupCommand,
    UpdateUserCommand,
)
from warden.application.context import Principal
from warden.application.queries import ListUsersQuery, ValidateCredentialsQuery
from warden.domain.shared.exceptions import UnauthorizedError
from warden.presentation.api.container import AppContainer


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


Container = Annotated[AppContainer, Depends(get_container)]


def get_current_principal(request: Request) -> Principal:
    """Return the principal attached by the authentication gate."""
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise UnauthorizedError
    return principal


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


# -----------------------------------------------------------------------------
# Commands & Queries
# -----------------------------------------------------------------------------


def get_signup_command(container: Container) -> SignupCommand:
    return SignupCommand(
        credential_repository=container.credential_repository,
        password_service=container.password_service,
        create_user_command=CreateUserCommand(container.user_repository),
    )


def get_validate_credentials_query(container: Container) -> ValidateCredentialsQuery:
    return ValidateCredentialsQuery(
        credential_repository=container.credential_repository,
        user_repository=container.user_repository,
        password_service=container.password_service,
    )


def get_issue_token_command(container: Container) -> IssueTokenCommand:
    return IssueTokenCommand(container.token_service)


def get_list_users_query(container: Container) -> ListUsersQuery:
    return ListUsersQuery(container.user_repository)


def get_update_user_command(container: Container) -> UpdateUserCommand:
    return UpdateUserCommand(container.user_repository)


SignupCommandDep = Annotated[SignupCommand, Depends(get_signup_command)]
ValidateCredentialsDep = Annotated[
    ValidateCredentialsQuery,
    Depends(get_validate_credentials_query),
]
IssueTokenDep = Annotated[IssueTokenCommand, Depends(get_issue_token_command)]
ListUsersDep = Annotated[ListUsersQuery, Depends(get_list_users_query)]
UpdateUserDep = Annotated[UpdateUserCommand, Depends(get_update_user_command)]
