from warden.application.commands.user.create_user_command import CreateUserCommand
from warden.application.commands.user.update_user_command import UpdateUserCommand

__all__ = ["CreateUserCommand", "UpdateUserCommand"]
