"""Tests for ShoeListController."""

import asyncio
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

from shoe_inventory.core.host import (
    DELETE_FAILED,
    DELETE_SUCCEEDED,
    FETCH_FAILED,
    ConfirmPrompt,
    Notification,
    Screen,
)
from shoe_inventory.core.list_state import ShoeListState
from shoe_inventory.core.shoe_list_controller import ShoeListController
from shoe_inventory.schemas.product import Product, ServiceResponse
from shoe_inventory.services.shoe_service import ShoeService, ShoeServiceError


class FakeHost:
    """Screen host that records what the controller asked for."""

    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.notifications: list[Notification] = []
        self.prompts: list[ConfirmPrompt] = []
        self.navigations: list[tuple[Screen, dict[str, Any] | None]] = []

    def navigate(self, screen: Screen, params: dict[str, Any] | None = None) -> None:
        self.navigations.append((screen, params))

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    async def confirm(self, prompt: ConfirmPrompt) -> bool:
        self.prompts.append(prompt)
        return self.answer


def listing(*items: Product, status: int = 200) -> ServiceResponse[list[Product]]:
    return ServiceResponse[list[Product]](status=status, data=list(items))


@pytest.fixture
def air() -> Product:
    return Product.model_validate(
        {"id": 1, "tenSanPham": "Air", "maSanPham": "A1", "giaSanPham": 100, "size": "42"}
    )


@pytest.fixture
def jordan() -> Product:
    return Product(id=2, name="Jordan", code="J1", price=250, size="43")


@pytest.fixture
def service() -> AsyncMock:
    return AsyncMock(spec=ShoeService)


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def controller(service: AsyncMock, host: FakeHost) -> ShoeListController:
    return ShoeListController(service=service, host=host)


class TestLoad:
    """Tests for load, refresh and focus handling."""

    @pytest.mark.asyncio
    async def test_load_replaces_items_with_payload(
        self, controller: ShoeListController, service: AsyncMock, air: Product
    ):
        service.get_all_shoes.return_value = listing(air)

        result = await controller.load()

        assert result is True
        assert controller.state.items == (air,)
        assert controller.state.items[0].name == "Air"
        assert controller.state.loading is False
        assert controller.state.refreshing is False

    @pytest.mark.asyncio
    async def test_load_accepts_half_size_and_negative_price(self, host: FakeHost):
        payload = [
            {"id": 1, "tenSanPham": "Air", "maSanPham": "A1", "giaSanPham": 100, "size": 42.5},
            {"id": 2, "tenSanPham": "Jordan", "maSanPham": "J1", "giaSanPham": -1, "size": "43"},
        ]
        service = ShoeService(base_url="http://test-shoes:3000", path="/shoes")
        service._client = httpx.AsyncClient(
            base_url=service.base_url,
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json=payload)),
        )
        controller = ShoeListController(service=service, host=host)

        result = await controller.load()
        await service.close()

        assert result is True
        assert [item.size for item in controller.state.items] == [42.5, "43"]
        assert [item.price for item in controller.state.items] == [100, -1]
        assert host.notifications == []

    @pytest.mark.asyncio
    async def test_load_keeps_service_order(
        self, controller: ShoeListController, service: AsyncMock, air: Product, jordan: Product
    ):
        service.get_all_shoes.return_value = listing(jordan, air)

        await controller.load()

        assert controller.state.items == (jordan, air)

    @pytest.mark.asyncio
    async def test_failed_load_keeps_previous_items(
        self,
        service: AsyncMock,
        host: FakeHost,
        air: Product,
    ):
        controller = ShoeListController(
            service=service,
            host=host,
            state=ShoeListState(items=(air,), loading=False),
        )
        service.get_all_shoes.side_effect = ShoeServiceError("boom", status_code=500)

        result = await controller.load()

        assert result is False
        assert controller.state.items == (air,)
        assert controller.state.loading is False
        assert host.notifications == [FETCH_FAILED]

    @pytest.mark.asyncio
    async def test_first_load_failure_clears_loading(
        self, controller: ShoeListController, service: AsyncMock, host: FakeHost
    ):
        service.get_all_shoes.side_effect = ShoeServiceError("Connection refused")

        await controller.load()

        assert controller.state.loading is False
        assert controller.state.items == ()
        assert host.notifications == [FETCH_FAILED]

    @pytest.mark.asyncio
    async def test_non_ok_response_is_a_failure(
        self, controller: ShoeListController, service: AsyncMock, host: FakeHost, air: Product
    ):
        service.get_all_shoes.return_value = listing(air, status=304)

        result = await controller.load()

        assert result is False
        assert controller.state.items == ()
        assert host.notifications == [FETCH_FAILED]

    @pytest.mark.asyncio
    async def test_loading_flag_only_during_first_load(
        self, controller: ShoeListController, service: AsyncMock, air: Product
    ):
        service.get_all_shoes.return_value = listing(air)
        observed: list[tuple[bool, bool]] = []
        controller.subscribe(lambda s: observed.append((s.loading, s.refreshing)))

        await controller.on_screen_focus()
        await controller.on_screen_focus()
        await controller.refresh()

        assert observed == [
            (True, False),
            (False, False),
            (False, False),
            (False, False),
            (False, True),
            (False, False),
        ]

    @pytest.mark.asyncio
    async def test_refresh_sets_refreshing_during_fetch(
        self, service: AsyncMock, host: FakeHost, air: Product
    ):
        controller = ShoeListController(
            service=service, host=host, state=ShoeListState(loading=False)
        )
        seen_during_fetch: list[bool] = []

        async def get_all_shoes():
            seen_during_fetch.append(controller.state.refreshing)
            return listing(air)

        service.get_all_shoes.side_effect = get_all_shoes

        result = await controller.refresh()

        assert result is True
        assert seen_during_fetch == [True]
        assert controller.state.refreshing is False

    @pytest.mark.asyncio
    async def test_refresh_failure_clears_refreshing(
        self, service: AsyncMock, host: FakeHost
    ):
        controller = ShoeListController(
            service=service, host=host, state=ShoeListState(loading=False)
        )
        service.get_all_shoes.side_effect = ShoeServiceError("timeout")

        await controller.refresh()

        assert controller.state.refreshing is False
        assert host.notifications == [FETCH_FAILED]

    @pytest.mark.asyncio
    async def test_every_focus_refetches(
        self, controller: ShoeListController, service: AsyncMock, air: Product
    ):
        service.get_all_shoes.return_value = listing(air)

        await controller.on_screen_focus()
        await controller.on_screen_focus()
        await controller.on_screen_focus()

        assert service.get_all_shoes.await_count == 3

    @pytest.mark.asyncio
    async def test_stale_response_does_not_overwrite_newer_one(
        self,
        controller: ShoeListController,
        service: AsyncMock,
        host: FakeHost,
        air: Product,
        jordan: Product,
    ):
        release_first = asyncio.Event()
        calls = 0

        async def get_all_shoes():
            nonlocal calls
            calls += 1
            if calls == 1:
                await release_first.wait()
                return listing(air)
            return listing(jordan)

        service.get_all_shoes.side_effect = get_all_shoes

        slow = asyncio.create_task(controller.refresh())
        await asyncio.sleep(0)
        assert controller.state.refreshing is True

        fast_result = await controller.on_screen_focus()
        release_first.set()
        slow_result = await slow

        assert fast_result is True
        assert slow_result is False
        assert controller.state.items == (jordan,)
        assert controller.state.refreshing is False
        assert host.notifications == []

    @pytest.mark.asyncio
    async def test_stale_failure_is_not_reported(
        self,
        controller: ShoeListController,
        service: AsyncMock,
        host: FakeHost,
        jordan: Product,
    ):
        release_first = asyncio.Event()
        calls = 0

        async def get_all_shoes():
            nonlocal calls
            calls += 1
            if calls == 1:
                await release_first.wait()
                raise ShoeServiceError("late failure")
            return listing(jordan)

        service.get_all_shoes.side_effect = get_all_shoes

        slow = asyncio.create_task(controller.load())
        await asyncio.sleep(0)
        await controller.load()
        release_first.set()
        await slow

        assert controller.state.items == (jordan,)
        assert host.notifications == []


class TestDelete:
    """Tests for confirm-then-delete."""

    @pytest.mark.asyncio
    async def test_delete_prompt_texts(
        self, controller: ShoeListController, host: FakeHost
    ):
        host.answer = False

        await controller.request_delete(1, "Air")

        prompt = host.prompts[0]
        assert prompt.title == "Xác nhận xóa"
        assert prompt.message == 'Bạn có chắc muốn xóa "Air" không?'
        assert prompt.cancel_label == "Hủy"
        assert prompt.confirm_label == "Xóa"
        assert prompt.destructive is True

    @pytest.mark.asyncio
    async def test_cancelled_delete_does_nothing(
        self, service: AsyncMock, host: FakeHost, air: Product
    ):
        host.answer = False
        initial = ShoeListState(items=(air,), loading=False)
        controller = ShoeListController(service=service, host=host, state=initial)

        result = await controller.request_delete(1, "Air")

        assert result is False
        service.delete_shoe.assert_not_called()
        service.get_all_shoes.assert_not_called()
        assert controller.state is initial
        assert host.notifications == []

    @pytest.mark.asyncio
    async def test_confirmed_delete_reloads_once(
        self,
        controller: ShoeListController,
        service: AsyncMock,
        host: FakeHost,
        jordan: Product,
    ):
        service.delete_shoe.return_value = ServiceResponse[None](status=200)
        service.get_all_shoes.return_value = listing(jordan)

        result = await controller.request_delete(1, "Air")

        assert result is True
        service.delete_shoe.assert_awaited_once_with(1)
        assert service.get_all_shoes.await_count == 1
        assert controller.state.items == (jordan,)
        assert host.notifications == [DELETE_SUCCEEDED]

    @pytest.mark.asyncio
    async def test_failed_delete_keeps_item(
        self, service: AsyncMock, host: FakeHost, air: Product
    ):
        controller = ShoeListController(
            service=service, host=host, state=ShoeListState(items=(air,), loading=False)
        )
        service.delete_shoe.side_effect = ShoeServiceError("not found", status_code=404)

        result = await controller.request_delete(1, "Air")

        assert result is False
        assert controller.state.items == (air,)
        assert host.notifications == [DELETE_FAILED]
        service.get_all_shoes.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejected_delete_status_is_a_failure(
        self, controller: ShoeListController, service: AsyncMock, host: FakeHost
    ):
        service.delete_shoe.return_value = ServiceResponse[None](status=409)

        result = await controller.request_delete(1, "Air")

        assert result is False
        assert host.notifications == [DELETE_FAILED]
        service.get_all_shoes.assert_not_called()

    @pytest.mark.asyncio
    async def test_reload_failure_after_delete(
        self, controller: ShoeListController, service: AsyncMock, host: FakeHost
    ):
        service.delete_shoe.return_value = ServiceResponse[None](status=200)
        service.get_all_shoes.side_effect = ShoeServiceError("boom")

        result = await controller.request_delete(1, "Air")

        assert result is True
        assert host.notifications == [DELETE_SUCCEEDED, FETCH_FAILED]


class TestNavigation:
    """Tests for add/edit navigation."""

    def test_navigate_to_edit_passes_item(
        self, controller: ShoeListController, host: FakeHost, air: Product
    ):
        controller.navigate_to_edit(air)

        assert host.navigations == [(Screen.EDIT_SHOE, {"shoe": air})]
        assert host.navigations[0][0] == "EditShoe"

    def test_navigate_to_add_has_no_params(
        self, controller: ShoeListController, host: FakeHost
    ):
        controller.navigate_to_add()

        assert host.navigations == [(Screen.ADD_SHOE, None)]
        assert host.navigations[0][0] == "AddShoe"


class TestSubscribe:
    """Tests for state listeners."""

    @pytest.mark.asyncio
    async def test_unsubscribe_stops_updates(
        self, controller: ShoeListController, service: AsyncMock, air: Product
    ):
        service.get_all_shoes.return_value = listing(air)
        seen: list[ShoeListState] = []
        unsubscribe = controller.subscribe(seen.append)

        await controller.load()
        count = len(seen)
        unsubscribe()
        await controller.load()

        assert count == 2
        assert len(seen) == count
        assert seen[-1].items == (air,)
