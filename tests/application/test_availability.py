"""Tests for the availability controller and its degradation tiers."""

import pytest

from beadstock.application.availability import (
    AvailabilityController,
    DataSource,
    StoreState,
)
from beadstock.application.demo_inventory import SAMPLE_STOCK
from beadstock.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    SeedUnreadableError,
    StoreUnavailableError,
)
from beadstock.domain.model.category import OTHER_CATEGORY
from beadstock.domain.model.inventory import InventoryItem
from beadstock.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from beadstock.infrastructure.seed.seed_file import SeedFile
from tests.fakes import FakeInventoryRepository, FakeSeedSource


def _controller(codes=("A1", "A2"), available=True):
    repo = FakeInventoryRepository()
    repo.available = available
    controller = AvailabilityController(repo, FakeSeedSource(list(codes)))
    return controller, repo


class TestConnect:

    def test_starts_disconnected(self):
        controller, _ = _controller()
        assert controller.state is StoreState.DISCONNECTED

    def test_disconnected_reads_demo_then_live_after_connect(self):
        controller, _ = _controller(codes=["A1", "A2"])

        before = controller.list_items()
        assert before.source is DataSource.DEMO

        assert controller.connect() is True
        assert controller.state is StoreState.CONNECTED

        after = controller.list_items()
        assert after.source is DataSource.LIVE
        assert [(i.code, i.quantity) for i in after.data] == [("A1", 0), ("A2", 0)]
        assert not any(i.id.startswith("demo_") for i in after.data)

    def test_connect_does_not_seed_non_empty_store(self):
        controller, repo = _controller(codes=["A1", "A2"])
        controller.connect()
        controller.create_item("Z1", 3)
        controller.connect()
        assert repo.count() == 3

    def test_connect_with_existing_data_skips_seed(self):
        controller, repo = _controller(codes=["A1", "A2"])
        repo.add(InventoryItem.create("Q5", 1))
        controller.connect()
        assert [i.code for i in controller.list_items().data] == ["Q5"]

    def test_missing_seed_is_skipped_silently(self):
        repo = FakeInventoryRepository()
        controller = AvailabilityController(repo, FakeSeedSource(None))
        assert controller.connect() is True
        assert repo.count() == 0
        assert controller.list_items().data == []

    def test_failed_ping_stays_disconnected(self):
        controller, _ = _controller(available=False)
        assert controller.connect() is False
        assert controller.state is StoreState.DISCONNECTED

    def test_reconnect_after_outage(self):
        controller, repo = _controller(available=False)
        controller.connect()
        repo.available = True
        assert controller.connect() is True
        assert controller.list_items().source is DataSource.LIVE


class TestDegradedReads:

    def test_demo_reads_while_disconnected(self):
        controller, _ = _controller(codes=["A1", "B1", "7X"])
        assert controller.categories().data == {"A", "B", OTHER_CATEGORY}
        assert controller.categories().source is DataSource.DEMO
        by_cat = controller.items_by_category("B")
        assert [i.code for i in by_cat.data] == ["B1"]
        assert by_cat.source is DataSource.DEMO
        assert controller.export().source is DataSource.DEMO

    def test_demo_get_item(self):
        controller, _ = _controller(codes=["A1"])
        result = controller.get_item("demo_1")
        assert result.data.code == "A1"
        assert result.source is DataSource.DEMO
        with pytest.raises(EntityNotFoundError):
            controller.get_item("missing")

    def test_live_failure_falls_back_to_demo_on_error(self):
        controller, repo = _controller()
        controller.connect()
        repo.available = False

        result = controller.list_items()
        assert result.source is DataSource.DEMO_ON_ERROR
        assert result.data
        assert controller.state is StoreState.DISCONNECTED

        assert controller.list_items().source is DataSource.DEMO

    def test_mark_unavailable(self):
        controller, _ = _controller()
        controller.connect()
        controller.mark_unavailable("maintenance")
        assert controller.list_items().source is DataSource.DEMO


class TestWrites:

    def test_writes_rejected_while_disconnected(self):
        controller, _ = _controller()
        with pytest.raises(StoreUnavailableError):
            controller.create_item("A9")
        with pytest.raises(StoreUnavailableError):
            controller.set_quantity("demo_1", 3)
        with pytest.raises(StoreUnavailableError):
            controller.adjust("demo_1", "increase", 1)
        with pytest.raises(StoreUnavailableError):
            controller.delete_item("demo_1")
        with pytest.raises(StoreUnavailableError):
            controller.import_seed()
        with pytest.raises(StoreUnavailableError):
            controller.reset()

    def test_write_failure_disconnects_and_reraises(self):
        controller, repo = _controller()
        controller.connect()
        repo.available = False
        with pytest.raises(StoreUnavailableError):
            controller.create_item("A9")
        assert controller.state is StoreState.DISCONNECTED

    def test_domain_errors_pass_through_without_disconnecting(self):
        controller, _ = _controller()
        controller.connect()
        with pytest.raises(ConflictError):
            controller.create_item("A1")
        assert controller.connected

    def test_live_crud_cycle(self):
        controller, _ = _controller(codes=[])
        controller.connect()
        first = controller.create_item("A1", 5)
        assert controller.adjust(first.id, "decrease", 2).quantity == 3
        assert controller.set_quantity(first.id, 10).quantity == 10
        controller.delete_item(first.id)
        second = controller.create_item("A1", 3)
        assert second.id != first.id
        assert controller.get_item(second.id).source is DataSource.LIVE

    def test_reset_and_import(self):
        controller, repo = _controller(codes=["A1", "A2"])
        controller.connect()
        controller.create_item("Z1")
        assert controller.import_seed() == 0
        assert controller.reset() == 2
        assert sorted(i.code for i in repo.list_all()) == ["A1", "A2"]


class TestStatus:

    def test_status_connected(self):
        controller, _ = _controller()
        controller.connect()
        status = controller.status()
        assert status.state == "connected"
        assert status.records == 2

    def test_status_disconnected(self):
        controller, _ = _controller()
        status = controller.status()
        assert status.state == "disconnected"
        assert status.records is None

    def test_status_detects_lost_store(self):
        controller, repo = _controller()
        controller.connect()
        repo.available = False
        assert controller.status().state == "disconnected"


class TestBrokenAssets:

    @pytest.fixture
    def bad_seed(self, tmp_path):
        path = tmp_path / "codes.txt"
        path.write_bytes(b"A1\n\xff\xfeB1\n")
        return SeedFile(path)

    def test_unreadable_seed_serves_sample_stock_while_disconnected(self, bad_seed):
        repo = FakeInventoryRepository()
        repo.available = False
        controller = AvailabilityController(repo, bad_seed)

        result = controller.list_items()
        assert result.source is DataSource.DEMO
        assert sorted((i.code, i.quantity) for i in result.data) == sorted(SAMPLE_STOCK)

    def test_unreadable_seed_skipped_on_connect(self, bad_seed):
        repo = FakeInventoryRepository()
        controller = AvailabilityController(repo, bad_seed)
        assert controller.connect() is True
        assert controller.connected
        assert repo.count() == 0

    def test_manual_import_reports_unreadable_seed(self, bad_seed):
        controller = AvailabilityController(FakeInventoryRepository(), bad_seed)
        controller.connect()
        with pytest.raises(SeedUnreadableError):
            controller.import_seed()
        assert controller.connected

    def test_malformed_store_record_degrades_to_demo_on_error(self, tmp_path):
        store_file = tmp_path / "inventory.json"
        controller = AvailabilityController(
            JsonInventoryRepository(store_file), FakeSeedSource(["A1", "A2"])
        )
        assert controller.connect() is True
        store_file.write_text('[{"code": "A1"}]', encoding="utf-8")

        result = controller.list_items()
        assert result.source is DataSource.DEMO_ON_ERROR
        assert [i.code for i in result.data] == ["A1", "A2"]
        assert controller.state is StoreState.DISCONNECTED

    def test_malformed_store_fails_connect(self, tmp_path):
        store_file = tmp_path / "inventory.json"
        store_file.write_text('[{"code": "A1"}]', encoding="utf-8")
        controller = AvailabilityController(
            JsonInventoryRepository(store_file), FakeSeedSource(["A1"])
        )
        assert controller.connect() is False
        assert controller.list_items().source is DataSource.DEMO
