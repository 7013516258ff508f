from warden.domain.auth.aggregates.credential import MIN_PASSWORD_LENGTH, Credential

__all__ = ["Credential", "MIN_PASSWORD_LENGTH"]
