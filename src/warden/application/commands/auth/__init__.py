from warden.application.commands.auth.issue_token_command import IssueTokenCommand
from warden.application.commands.auth.signup_command import SignupCommand

__all__ = ["IssueTokenCommand", "SignupCommand"]
