"""Integration tests using mongo_stubs against small data-access layers."""

from typing import Any
from unittest.mock import NonCallableMagicMock

import pytest

from mongo_stubs import (
    document_array,
    document_stream,
    mock_client,
    mock_collection,
    mock_database,
)
from mongo_stubs.config import StubSettings


class CustomerRepository:
    """Repository with its database injected at construction."""

    def __init__(self, db: Any) -> None:
        self._db = db

    async def find_customers_in_organization(self, org_name: str) -> list[dict[str, Any]]:
        return await self._db.get_collection("customers").find({"org_name": org_name}).to_list(None)

    async def update_customer(self, customer_id: str, updates: dict[str, Any]) -> dict[str, Any]:
        result = await self._db["customers"].find_one_and_update(
            {"_id": customer_id}, {"$set": updates}
        )
        return result["value"]

    async def customer_names(self, org_name: str) -> list[str]:
        return [
            customer["name"]
            async for customer in self._db["customers"].find({"org_name": org_name}).stream()
        ]


class CustomerHandler:
    """Request handler reaching its collection through a connected client."""

    def __init__(self, client: Any) -> None:
        self._client = client

    async def get(self, customer_id: str) -> dict[str, Any] | None:
        client = await self._client.connect()
        return await client.get_database("crm").get_collection("customers").find_one(
            {"_id": customer_id}
        )

    async def update(self, customer_id: str, body: dict[str, Any]) -> int:
        client = await self._client.connect()
        await client["crm"]["customers"].update_one({"_id": customer_id}, {"$set": body})
        return 204


class TestCustomerRepository:
    """Repository tests with an injected database substitute."""

    @pytest.fixture
    def customers(self, stub_settings: StubSettings) -> NonCallableMagicMock:
        return mock_collection(settings=stub_settings)

    @pytest.fixture
    def repository(
        self,
        customers: NonCallableMagicMock,
        stub_settings: StubSettings,
    ) -> CustomerRepository:
        return CustomerRepository(mock_database({"customers": customers}, settings=stub_settings))

    @pytest.mark.asyncio
    async def test_find_operation(
        self,
        customers: NonCallableMagicMock,
        repository: CustomerRepository,
        sample_customers: list[dict[str, Any]],
    ) -> None:
        customers.find.with_args({"org_name": "acme"}).returns(document_array(sample_customers))

        result = await repository.find_customers_in_organization("acme")

        assert result == sample_customers
        customers.find.assert_called_once_with({"org_name": "acme"})

    @pytest.mark.asyncio
    async def test_find_one_and_update_operation(
        self,
        customers: NonCallableMagicMock,
        repository: CustomerRepository,
        sample_customer: dict[str, Any],
    ) -> None:
        updates = {"email": "ada@example.test"}
        updated = {**sample_customer, **updates}
        customers.find_one_and_update.with_args(
            {"_id": "cust-1"}, {"$set": updates}
        ).resolves({"value": updated})

        result = await repository.update_customer("cust-1", updates)

        assert result == updated
        customers.find_one_and_update.assert_awaited_once_with({"_id": "cust-1"}, {"$set": updates})

    @pytest.mark.asyncio
    async def test_streamed_find_operation(
        self,
        customers: NonCallableMagicMock,
        repository: CustomerRepository,
        sample_customers: list[dict[str, Any]],
    ) -> None:
        customers.find.with_args({"org_name": "acme"}).returns(document_stream(sample_customers))

        names = await repository.customer_names("acme")

        assert names == ["Ada", "Grace", "Edsger"]


class TestCustomerHandler:
    """Handler tests with a client substitute wired down to the collection."""

    @pytest.fixture
    def customers(self, stub_settings: StubSettings) -> NonCallableMagicMock:
        return mock_collection(settings=stub_settings)

    @pytest.fixture
    def handler(
        self,
        customers: NonCallableMagicMock,
        stub_settings: StubSettings,
    ) -> CustomerHandler:
        crm = mock_database({"customers": customers}, settings=stub_settings)
        return CustomerHandler(mock_client({"crm": crm}, settings=stub_settings))

    @pytest.mark.asyncio
    async def test_get_operation(
        self,
        customers: NonCallableMagicMock,
        handler: CustomerHandler,
        sample_customer: dict[str, Any],
    ) -> None:
        customers.find_one.with_args({"_id": "cust-1"}).resolves(sample_customer)

        assert await handler.get("cust-1") == sample_customer
        assert await handler.get("cust-404") is None

    @pytest.mark.asyncio
    async def test_update_operation(
        self,
        customers: NonCallableMagicMock,
        handler: CustomerHandler,
    ) -> None:
        body = {"name": "Ada Lovelace"}
        customers.update_one.with_args({"_id": "cust-1"}, {"$set": body}).resolves(None)

        status = await handler.update("cust-1", body)

        assert status == 204
        customers.update_one.assert_awaited_once_with({"_id": "cust-1"}, {"$set": body})

    @pytest.mark.asyncio
    async def test_failed_update_propagates(
        self,
        customers: NonCallableMagicMock,
        handler: CustomerHandler,
    ) -> None:
        customers.update_one.rejects(ConnectionError("server unavailable"))

        with pytest.raises(ConnectionError, match="server unavailable"):
            await handler.update("cust-1", {"name": "x"})
