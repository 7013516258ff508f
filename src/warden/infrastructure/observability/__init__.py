from warden.infrastructure.observability.context import (
    correlation_id_var,
    get_correlation_id,
    resolve_correlation_id,
)
from warden.infrastructure.observability.logging import (
    CorrelationIdFilter,
    configure_logging,
)
from warden.infrastructure.observability.metrics import (
    RequestMetrics,
    endpoint_label,
)

__all__ = [
    "CorrelationIdFilter",
    "RequestMetrics",
    "configure_logging",
    "correlation_id_var",
    "endpoint_label",
    "get_correlation_id",
    "resolve_correlation_id",
]
