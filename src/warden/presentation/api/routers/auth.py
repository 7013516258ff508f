"""Authentication router for signup and login."""

import logging

from fastapi import APIRouter, status

from warden.domain.shared.unit_of_work import UnitOfWork
from warden.domain.user import User
from warden.presentation.api.dependencies import (
    Container,
    IssueTokenDep,
    SignupCommandDep,
    ValidateCredentialsDep,
)
from warden.presentation.api.pipeline.response import EnvelopedRoute
from warden.presentation.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    LoginUser,
    SignupRequest,
)
from warden.presentation.api.schemas.common import ErrorResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(route_class=EnvelopedRoute)


@router.post(
    "/signup",
    name="signup",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new account",
    responses={
        201: {"description": "Account created"},
        400: {"model": ErrorResponse, "description": "Invalid input or weak password"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def signup(
    request: SignupRequest,
    command: SignupCommandDep,
    container: Container,
) -> MessageResponse:
    """
    Create a credential and its user profile.

    Both rows are written in one transaction: if the profile cannot be
    stored, the credential is rolled back as well.
    """

    async def work(uow: UnitOfWork) -> User:
        return await command.execute(
            email=request.email,
            password=request.password,
            name=request.name,
            role=request.role,
            uow=uow,
        )

    await container.transaction_manager.run_in_transaction(work)
    return MessageResponse(message="User created successfully")


@router.post(
    "/login",
    name="login",
    summary="Authenticate with email and password",
    responses={
        200: {"description": "Login successful"},
        401: {"model": ErrorResponse, "description": "Wrong password"},
        404: {"model": ErrorResponse, "description": "Unknown email"},
    },
)
async def login(
    request: LoginRequest,
    validate_credentials: ValidateCredentialsDep,
    issue_token: IssueTokenDep,
) -> LoginResponse:
    user = await validate_credentials.execute(request.email, request.password)
    token = issue_token.execute(user)

    logger.info("User logged in: %s", user.id)
    return LoginResponse(
        token=token,
        user=LoginUser(id=user.id, name=user.name, role=user.role),
    )
