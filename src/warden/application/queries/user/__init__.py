from warden.application.queries.user.get_user_by_id_query import GetUserByIdQuery
from warden.application.queries.user.list_users_query import ListUsersQuery

__all__ = ["GetUserByIdQuery", "ListUsersQuery"]
