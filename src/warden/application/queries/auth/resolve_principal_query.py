from warden.application.context.principal import Principal
from warden.application.queries.auth.get_credential_by_id_query import (
    GetCredentialByIdQuery,
)
from warden.domain.auth import TokenService


class ResolvePrincipalQuery:
    """Turn a bearer token into the request principal.

    The credential is looked up to make sure it still exists; role and
    user id are taken from the token claims as signed.
    """

    def __init__(
        self,
        token_service: TokenService,
        get_credential_by_id: GetCredentialByIdQuery,
    ):
        self._token_service = token_service
        self._get_credential = get_credential_by_id

    async def execute(self, token: str) -> Principal:
        claims = self._token_service.verify(token)
        await self._get_credential.execute(claims.auth_id)
        return Principal.from_claims(claims)
