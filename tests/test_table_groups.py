"""
Tests for table grouping: TableGroupService and /api/table-groups.
"""
import pytest

from kitchenpos.core.exceptions import (
    InvalidTableGroupError,
    OrderTableNotFoundError,
    TableGroupInUseError,
    TableGroupNotFoundError,
    TableNotGroupableError,
)
from kitchenpos.models.order import OrderStatus
from kitchenpos.services.order import OrderService
from kitchenpos.services.table import OrderTableService, TableGroupService


def _snapshot(db):
    return [
        (t.id, t.empty, t.number_of_guests, t.table_group_id)
        for t in OrderTableService(db).list()
    ]


class TestCreateTableGroup:

    def test_group_empty_tables(self, db, make_table):
        first, second = make_table(), make_table()

        table_group = TableGroupService(db).create([first.id, second.id])

        assert table_group.id is not None
        assert table_group.created_date is not None
        assert [t.id for t in table_group.order_tables] == [first.id, second.id]
        for order_table in OrderTableService(db).list():
            assert order_table.table_group_id == table_group.id
            assert order_table.empty is False

    @pytest.mark.parametrize("ids", [[], [1]])
    def test_fewer_than_two_tables(self, db, make_table, ids):
        make_table()

        with pytest.raises(InvalidTableGroupError):
            TableGroupService(db).create(ids)

    def test_repeated_table(self, db, make_table):
        order_table = make_table()

        with pytest.raises(InvalidTableGroupError):
            TableGroupService(db).create([order_table.id, order_table.id])

    def test_unknown_table(self, db, make_table):
        order_table = make_table()

        with pytest.raises(OrderTableNotFoundError):
            TableGroupService(db).create([order_table.id, 9999])

    def test_occupied_table_leaves_all_tables_untouched(self, db, make_table):
        """Grouping [A(empty), B(non-empty)] fails and changes nothing."""
        first = make_table(empty=True)
        second = make_table(number_of_guests=2, empty=False)
        before = _snapshot(db)

        with pytest.raises(TableNotGroupableError):
            TableGroupService(db).create([first.id, second.id])

        db.expire_all()
        assert _snapshot(db) == before

    def test_already_grouped_table(self, db, make_table):
        first, second, third = make_table(), make_table(), make_table()
        service = TableGroupService(db)
        service.create([first.id, second.id])

        with pytest.raises(TableNotGroupableError):
            service.create([second.id, third.id])

        db.expire_all()
        third_after = next(t for t in OrderTableService(db).list() if t.id == third.id)
        assert third_after.empty is True
        assert third_after.table_group_id is None


class TestUngroup:

    @pytest.fixture
    def grouped(self, db, make_table):
        first, second = make_table(), make_table()
        table_group = TableGroupService(db).create([first.id, second.id])
        return table_group, first, second

    def test_ungroup_clears_group_references(self, db, grouped):
        table_group, first, second = grouped

        TableGroupService(db).ungroup(table_group.id)

        db.expire_all()
        for order_table in OrderTableService(db).list():
            assert order_table.table_group_id is None
            # Tables keep their own state after ungrouping
            assert order_table.empty is False

    @pytest.mark.parametrize("order_status", [OrderStatus.COOKING, OrderStatus.MEAL])
    def test_ungroup_blocked_by_active_order(self, db, grouped, make_order, order_status):
        table_group, first, _ = grouped
        order = make_order(order_table=first)
        OrderService(db).change_status(order.id, order_status)

        with pytest.raises(TableGroupInUseError):
            TableGroupService(db).ungroup(table_group.id)

        db.expire_all()
        assert all(t.table_group_id == table_group.id for t in OrderTableService(db).list())

    def test_ungroup_after_orders_complete(self, db, grouped, make_order):
        table_group, first, second = grouped
        order = make_order(order_table=second)
        OrderService(db).change_status(order.id, OrderStatus.COMPLETION)

        TableGroupService(db).ungroup(table_group.id)

        db.expire_all()
        assert all(t.table_group_id is None for t in OrderTableService(db).list())

    def test_ungroup_unknown_group(self, db):
        with pytest.raises(TableGroupNotFoundError):
            TableGroupService(db).ungroup(9999)

    def test_ungrouped_tables_can_be_grouped_again(self, db, grouped):
        table_group, first, second = grouped
        service = TableGroupService(db)
        service.ungroup(table_group.id)
        OrderTableService(db).change_empty(first.id, True)
        OrderTableService(db).change_empty(second.id, True)

        regrouped = service.create([first.id, second.id])

        assert regrouped.id != table_group.id


class TestTableGroupsRouter:
    """Tests for /api/table-groups."""

    def test_create_table_group(self, client, make_table):
        first, second = make_table(), make_table()

        response = client.post("/api/table-groups", json={"order_table_ids": [first.id, second.id]})

        assert response.status_code == 201
        data = response.json()
        assert {t["id"] for t in data["order_tables"]} == {first.id, second.id}
        assert all(t["table_group_id"] == data["id"] for t in data["order_tables"])
        assert all(t["empty"] is False for t in data["order_tables"])
        assert response.headers["Location"] == f"/api/table-groups/{data['id']}"

    def test_create_with_one_table(self, client, make_table):
        order_table = make_table()

        response = client.post("/api/table-groups", json={"order_table_ids": [order_table.id]})

        assert response.status_code == 400

    def test_create_with_unknown_table(self, client, make_table):
        order_table = make_table()

        response = client.post("/api/table-groups", json={"order_table_ids": [order_table.id, 9999]})

        assert response.status_code == 404

    def test_create_with_occupied_table(self, client, make_table):
        first = make_table()
        second = make_table(number_of_guests=2, empty=False)

        response = client.post("/api/table-groups", json={"order_table_ids": [first.id, second.id]})

        assert response.status_code == 409

    def test_get_table_group(self, client, make_table):
        first, second = make_table(), make_table()
        created = client.post("/api/table-groups", json={"order_table_ids": [first.id, second.id]}).json()

        response = client.get(f"/api/table-groups/{created['id']}")

        assert response.status_code == 200
        assert len(response.json()["order_tables"]) == 2

    def test_get_unknown_table_group(self, client):
        response = client.get("/api/table-groups/9999")

        assert response.status_code == 404

    def test_delete_table_group(self, client, make_table):
        first, second = make_table(), make_table()
        created = client.post("/api/table-groups", json={"order_table_ids": [first.id, second.id]}).json()

        response = client.delete(f"/api/table-groups/{created['id']}")

        assert response.status_code == 204
        tables = client.get("/api/order-tables").json()
        assert all(t["table_group_id"] is None for t in tables)

    def test_delete_unknown_table_group(self, client):
        response = client.delete("/api/table-groups/9999")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    def test_delete_table_group_with_active_order(self, client, make_table, make_menu):
        first, second = make_table(), make_table()
        menu = make_menu()
        created = client.post("/api/table-groups", json={"order_table_ids": [first.id, second.id]}).json()
        client.post("/api/orders", json={
            "order_table_id": first.id,
            "order_line_items": [{"menu_id": menu.id, "quantity": 1}],
        })

        response = client.delete(f"/api/table-groups/{created['id']}")

        assert response.status_code == 400
