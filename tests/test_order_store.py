import asyncio
import logging

import pytest
from pydantic import ValidationError

from order_dashboard.core.exceptions import (
    DuplicateOrderError,
    InvalidStatusTransitionError,
    OrderNotFoundError,
)
from order_dashboard.models import OrderStatus
from order_dashboard.services.orders import (
    InMemoryOrderStore,
    get_order_store,
    strict_validator,
)


async def test_list_all_keeps_insertion_order(store):
    orders = await store.list_all()
    assert [o.id for o in orders] == ["1", "2", "3", "4", "5", "6"]


@pytest.mark.parametrize("status", list(OrderStatus))
async def test_list_by_single_status_matches_filter(store, status):
    everything = await store.list_all()
    expected = [o.id for o in everything if o.status == status]

    result = await store.list_by_status({status})

    assert [o.id for o in result] == expected


async def test_list_by_several_statuses_preserves_relative_order(store):
    result = await store.list_by_status({OrderStatus.READY, OrderStatus.PENDING})
    assert [o.id for o in result] == ["1", "2", "5", "6"]


async def test_list_by_empty_status_set_is_empty(store):
    assert await store.list_by_status(set()) == []


async def test_list_by_a_single_status_value(store):
    assert [o.id for o in await store.list_by_status("ready")] == ["5", "6"]
    assert [o.id for o in await store.list_by_status(OrderStatus.PENDING)] == ["1", "2"]


async def test_get_unknown_order(store):
    with pytest.raises(OrderNotFoundError) as exc_info:
        await store.get("nope")
    assert exc_info.value.order_id == "nope"


async def test_update_status_writes_through(store):
    updated = await store.update_status("1", OrderStatus.IN_PRODUCTION)

    assert updated.id == "1"
    assert updated.status == OrderStatus.IN_PRODUCTION
    assert (await store.get("1")).status == OrderStatus.IN_PRODUCTION


async def test_update_status_accepts_any_status_by_default(store):
    await store.update_status("1", OrderStatus.DELIVERED)
    updated = await store.update_status("1", OrderStatus.PENDING)
    assert updated.status == OrderStatus.PENDING


async def test_update_unknown_order_leaves_store_untouched(store):
    before = [o.model_dump() for o in await store.list_all()]

    with pytest.raises(OrderNotFoundError):
        await store.update_status("missing", OrderStatus.READY)

    after = [o.model_dump() for o in await store.list_all()]
    assert after == before


async def test_returned_orders_are_snapshots(store):
    order = await store.get("1")
    order.status = OrderStatus.CANCELLED
    order.items[0].quantity = 99

    fresh = await store.get("1")
    assert fresh.status == OrderStatus.PENDING
    assert fresh.items[0].quantity == 1


async def test_created_at_and_id_are_immutable(store):
    order = await store.get("1")
    with pytest.raises(ValidationError):
        order.created_at = order.created_at
    with pytest.raises(ValidationError):
        order.id = "2"


async def test_strict_store_rejects_backward_transition(make_order):
    store = InMemoryOrderStore(
        [make_order(OrderStatus.READY, order_id="a")],
        min_latency=0,
        max_latency=0,
        transitions=strict_validator(),
    )

    with pytest.raises(InvalidStatusTransitionError) as exc_info:
        await store.update_status("a", OrderStatus.PENDING)

    assert exc_info.value.current == OrderStatus.READY
    assert exc_info.value.target == OrderStatus.PENDING
    assert (await store.get("a")).status == OrderStatus.READY


async def test_strict_store_allows_forward_and_cancel(make_order):
    store = InMemoryOrderStore(
        [make_order(OrderStatus.PENDING, order_id="a")],
        min_latency=0,
        max_latency=0,
        transitions=strict_validator(),
    )

    await store.update_status("a", OrderStatus.IN_PRODUCTION)
    cancelled = await store.update_status("a", OrderStatus.CANCELLED)
    assert cancelled.status == OrderStatus.CANCELLED

    with pytest.raises(InvalidStatusTransitionError):
        await store.update_status("a", OrderStatus.READY)


async def test_add_rejects_duplicate_id(store, make_order):
    with pytest.raises(DuplicateOrderError):
        await store.add(make_order(order_id="1"))
    assert len(await store.list_all()) == 6


async def test_add_appends_new_order(store, make_order):
    await store.add(make_order(OrderStatus.READY, order_id="7"))
    orders = await store.list_all()
    assert orders[-1].id == "7"


def test_constructor_rejects_duplicate_ids(make_order):
    with pytest.raises(DuplicateOrderError):
        InMemoryOrderStore([make_order(order_id="x"), make_order(order_id="x")])


def test_constructor_rejects_inverted_latency():
    with pytest.raises(ValueError):
        InMemoryOrderStore([], min_latency=1.0, max_latency=0.5)


async def test_every_call_suspends(store):
    ran = []

    async def bystander():
        ran.append(True)

    task = asyncio.create_task(bystander())
    await store.list_all()

    assert ran == [True]
    await task


async def test_concurrent_updates_to_same_order_are_serialized(make_order, caplog):
    store = InMemoryOrderStore(
        [make_order(order_id="a")], min_latency=0, max_latency=0.01
    )
    targets = [OrderStatus.IN_PRODUCTION, OrderStatus.READY, OrderStatus.DELIVERED] * 5

    with caplog.at_level(logging.INFO, logger="order_dashboard.services.orders.mock"):
        await asyncio.gather(*(store.update_status("a", s) for s in targets))

    writes = [
        tuple(record.getMessage().rsplit(": ", 1)[1].split(" -> "))
        for record in caplog.records
        if " -> " in record.getMessage()
    ]
    assert len(writes) == len(targets)
    assert writes[0][0] == OrderStatus.PENDING.value
    for (_, written), (seen, _) in zip(writes, writes[1:]):
        assert seen == written
    assert sorted(new for _, new in writes) == sorted(s.value for s in targets)
    assert (await store.get("a")).status.value == writes[-1][1]
    assert len(await store.list_all()) == 1


async def test_factory_seeds_demo_orders_in_development(fresh_settings):
    fresh_settings.setenv("ENV_MODE", "development")
    fresh_settings.setenv("STORE_MIN_LATENCY", "0")
    fresh_settings.setenv("STORE_MAX_LATENCY", "0")

    store = get_order_store()

    assert store is get_order_store()
    assert store.provider_name == "memory"
    assert len(await store.list_all()) == 6


async def test_factory_starts_empty_in_production(fresh_settings):
    fresh_settings.setenv("ENV_MODE", "production")
    fresh_settings.setenv("STORE_MIN_LATENCY", "0")
    fresh_settings.setenv("STORE_MAX_LATENCY", "0")
    fresh_settings.setenv("ENFORCE_STATUS_TRANSITIONS", "true")

    store = get_order_store()

    assert await store.list_all() == []
    assert store.transitions is not None
