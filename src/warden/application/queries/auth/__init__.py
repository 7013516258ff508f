from warden.application.queries.auth.get_credential_by_id_query import (
    GetCredentialByIdQuery,
)
from warden.application.queries.auth.resolve_principal_query import (
    ResolvePrincipalQuery,
)
from warden.application.queries.auth.validate_credentials_query import (
    ValidateCredentialsQuery,
)

__all__ = [
    "GetCredentialByIdQuery",
    "ResolvePrincipalQuery",
    "ValidateCredentialsQuery",
]
