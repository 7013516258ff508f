"""Unit tests for the idempotency gate against the in-process ledger."""

import asyncio
from types import SimpleNamespace

import pytest

from warden.application.services import IdempotencyService
from warden.domain.shared.exceptions import (
    DuplicateOperationError,
    IdempotencyKeyRequiredError,
)
from warden.infrastructure.cache import InMemoryTTLCache
from warden.presentation.api.pipeline.gates import check_idempotency
from warden.presentation.api.pipeline.policies import RoutePolicy

POLICY = RoutePolicy(requires_auth=True, idempotency_operation="update-user")


def make_request(token="k-1", principal_id="user-1"):
    headers = {"X-Idempotency-Key": token} if token else {}
    return SimpleNamespace(
        headers=headers,
        state=SimpleNamespace(principal=SimpleNamespace(id=principal_id)),
    )


class TestCheckIdempotency:
    def setup_method(self):
        self.service = IdempotencyService(InMemoryTTLCache())
        self.container = SimpleNamespace(idempotency_service=self.service)

    async def test_route_without_operation_is_untouched(self):
        request = make_request(token=None)

        await check_idempotency(request, RoutePolicy(), self.container)

        assert not hasattr(request.state, "idempotency_key")

    async def test_missing_header(self):
        with pytest.raises(IdempotencyKeyRequiredError):
            await check_idempotency(make_request(token=None), POLICY, self.container)

    async def test_first_call_reserves_key(self):
        request = make_request()

        await check_idempotency(request, POLICY, self.container)

        assert request.state.idempotency_key == "idempotency:user-1:update-user:k-1"
        assert await self.service.reserve(request.state.idempotency_key) is False

    async def test_overlapping_first_calls_let_one_through(self):
        requests = [make_request() for _ in range(3)]

        outcomes = await asyncio.gather(
            *(check_idempotency(r, POLICY, self.container) for r in requests),
            return_exceptions=True,
        )

        passed = [o for o in outcomes if o is None]
        rejected = [o for o in outcomes if isinstance(o, DuplicateOperationError)]
        assert len(passed) == 1
        assert len(rejected) == 2
        # nothing recorded yet while the winner is still running
        assert all(e.previous_result is None for e in rejected)

    async def test_completed_call_is_replayed(self):
        first = make_request()
        await check_idempotency(first, POLICY, self.container)
        await self.service.mark_as_processed(first.state.idempotency_key, {"v": 1})
        await self.service.release(first.state.idempotency_key)

        with pytest.raises(DuplicateOperationError) as exc_info:
            await check_idempotency(make_request(), POLICY, self.container)

        assert exc_info.value.previous_result == {"v": 1}
        # the rejected call gave its reservation back
        assert await self.service.reserve(first.state.idempotency_key) is True

    async def test_removed_key_can_be_retried(self):
        first = make_request()
        await check_idempotency(first, POLICY, self.container)
        await self.service.remove(first.state.idempotency_key)

        retry = make_request()
        await check_idempotency(retry, POLICY, self.container)

        assert retry.state.idempotency_key == first.state.idempotency_key
