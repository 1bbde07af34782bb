from unittest.mock import MagicMock, patch

import pytest
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from services.inventory.domain.value_object import InventoryId, SeatSet
from services.inventory.infrastructure.dynamodb_inventory_repository import (
    DynamoDBInventoryRepository,
)
from services.shared.domain import IsoDateTime
from services.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def table():
    return MagicMock()


@pytest.fixture
def repository(table):
    with patch(
        "services.inventory.infrastructure.dynamodb_inventory_repository.boto3"
    ) as mock_boto3:
        mock_boto3.resource.return_value.Table.return_value = table
        yield DynamoDBInventoryRepository(table_name="test-table")


class TestDynamoDBInventoryRepository:
    """DynamoDBInventoryRepository のテスト"""

    def test_save_writes_item_with_route_index(
        self, repository, table, create_inventory
    ):
        inventory = create_inventory(inventory_id="inv-001", total_seats=3)

        repository.save(inventory)

        item = table.put_item.call_args.kwargs["Item"]
        assert item["PK"] == "INVENTORY#inv-001"
        assert item["SK"] == "INVENTORY"
        assert item["GSI1PK"] == "ROUTE#HYD#BLR"
        assert item["GSI1SK"] == inventory.departure_time.to_sort_key()
        assert item["available_seats"] == ["S1", "S2", "S3"]
        assert item["version"] == 0

    def test_save_duplicate_raises_error(self, repository, table, create_inventory):
        table.put_item.side_effect = _client_error(
            "ConditionalCheckFailedException", "PutItem"
        )

        with pytest.raises(DuplicateResourceException):
            repository.save(create_inventory())

    def test_update_is_conditioned_on_version(
        self, repository, table, create_inventory
    ):
        inventory = create_inventory(version=4)
        inventory.reserve(SeatSet.of(["S1"]))

        repository.update(inventory)

        kwargs = table.update_item.call_args.kwargs
        assert kwargs["ExpressionAttributeValues"][":next"] == 5
        assert kwargs["ExpressionAttributeValues"][":seats"] == ["S2", "S3", "S4", "S5"]

    def test_update_conflict_raises_optimistic_lock(
        self, repository, table, create_inventory
    ):
        table.update_item.side_effect = _client_error(
            "ConditionalCheckFailedException", "UpdateItem"
        )

        with pytest.raises(OptimisticLockException):
            repository.update(create_inventory())

    def test_other_client_errors_are_propagated(
        self, repository, table, create_inventory
    ):
        table.update_item.side_effect = _client_error(
            "ProvisionedThroughputExceededException", "UpdateItem"
        )

        with pytest.raises(ClientError):
            repository.update(create_inventory())

    def test_find_by_id_round_trips_item(self, repository, table, create_inventory):
        inventory = create_inventory(inventory_id="inv-001", version=2)
        repository.save(inventory)
        table.get_item.return_value = {"Item": table.put_item.call_args.kwargs["Item"]}

        found = repository.find_by_id(InventoryId(value="inv-001"))

        assert found == inventory
        assert found.version == 2
        assert found.available_seats == inventory.available_seats
        assert found.departure_time == inventory.departure_time

    def test_find_by_id_returns_none_when_missing(self, repository, table):
        table.get_item.return_value = {}

        assert repository.find_by_id(InventoryId(value="missing")) is None

    def test_find_by_route_follows_pagination(
        self, repository, table, create_inventory
    ):
        repository.save(create_inventory(inventory_id="a"))
        item_a = table.put_item.call_args.kwargs["Item"]
        repository.save(create_inventory(inventory_id="b"))
        item_b = table.put_item.call_args.kwargs["Item"]
        table.query.side_effect = [
            {"Items": [item_a], "LastEvaluatedKey": {"PK": "INVENTORY#a"}},
            {"Items": [item_b]},
        ]
        now = IsoDateTime.now()

        result = repository.find_by_route_and_departure_between(
            "HYD", "BLR", now, now.minus_hours(-24 * 7)
        )

        assert [str(inv.id) for inv in result] == ["a", "b"]
        assert table.query.call_count == 2
        second_call = table.query.call_args_list[1].kwargs
        assert second_call["IndexName"] == "GSI1"
        assert second_call["ExclusiveStartKey"] == {"PK": "INVENTORY#a"}

    def test_find_by_route_queries_exact_route_and_inclusive_range(
        self, repository, table
    ):
        """路線キーと出発時刻の範囲（両端を含む）をマイクロ秒精度で問い合わせる"""
        # Arrange
        table.query.return_value = {"Items": []}
        departure_from = IsoDateTime.from_string("2030-01-01T09:00:00.900")
        departure_to = IsoDateTime.from_string("2030-01-01T10:00:00")

        # Act
        repository.find_by_route_and_departure_between(
            "HYD", "BLR", departure_from, departure_to
        )

        # Assert
        kwargs = table.query.call_args.kwargs
        assert kwargs["IndexName"] == "GSI1"
        assert kwargs["KeyConditionExpression"] == Key("GSI1PK").eq(
            "ROUTE#HYD#BLR"
        ) & Key("GSI1SK").between(
            "2030-01-01T09:00:00.900000+00:00", "2030-01-01T10:00:00.000000+00:00"
        )

    def test_find_by_route_does_not_fold_case(self, repository, table):
        """路線コードの大文字小文字はそのままキーになる"""
        # Arrange
        table.query.return_value = {"Items": []}
        now = IsoDateTime.now()

        # Act
        repository.find_by_route_and_departure_between("hyd", "BLR", now, now)

        # Assert
        condition = table.query.call_args.kwargs["KeyConditionExpression"]
        partition_key = condition.get_expression()["values"][0]
        assert partition_key.get_expression()["values"][1] == "ROUTE#hyd#BLR"
        assert partition_key != Key("GSI1PK").eq("ROUTE#HYD#BLR")

    def test_saved_departure_matches_query_lower_bound(
        self, repository, table, create_inventory
    ):
        """保存したソートキーと同じ時刻を下限に指定すると、その便が範囲に含まれる"""
        # Arrange
        inventory = create_inventory()
        repository.save(inventory)
        saved_sort_key = table.put_item.call_args.kwargs["Item"]["GSI1SK"]
        table.query.return_value = {"Items": []}

        # Act
        repository.find_by_route_and_departure_between(
            "HYD", "BLR", inventory.departure_time, inventory.departure_time
        )

        # Assert
        condition = table.query.call_args.kwargs["KeyConditionExpression"]
        between = condition.get_expression()["values"][1]
        _, lower, upper = between.get_expression()["values"]
        assert lower == upper == saved_sort_key
