"""Commands: operations that change state (or sign tokens)."""

from warden.application.commands.auth import IssueTokenCommand, SignupCommand
from warden.application.commands.user import CreateUserCommand, UpdateUserCommand

__all__ = [
    "CreateUserCommand",
    "IssueTokenCommand",
    "SignupCommand",
    "UpdateUserCommand",
]
