from warden.application.services.idempotency_service import IdempotencyService

__all__ = ["IdempotencyService"]
