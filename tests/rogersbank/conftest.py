"""
Shared fixtures for the Rogers Bank tests.

`FakeBank` stands in for rbaccess.rogersbank.com behind an
`httpx.MockTransport`: responses are queued per (method, path) and every
request is recorded so tests can check bodies and ordering.
"""

import json
from collections import defaultdict
from typing import Any

import httpx
import pytest
import pytest_asyncio

from rogersbank.client import RogersBankClient
from rogersbank.urls import RogersBankApiUrls

GENERATE_CODE_PATH = RogersBankApiUrls.GENERATE_TWO_FACTOR_CODE.format(
    account_id="acc-1", customer_id="cust-1"
)


def json_response(status_code: int, body: Any) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(body).encode())


class FakeBank:
    """Canned responses keyed by method and URL path."""

    def __init__(self) -> None:
        self.responses: dict[tuple[str, str], list[httpx.Response]] = defaultdict(list)
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, *responses: httpx.Response) -> None:
        self.responses[(method, path)].extend(responses)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.responses.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(599, content=b"no canned response")
        # The last response repeats once the queue is drained
        return queue.pop(0) if len(queue) > 1 else queue[0]

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def body(self, index: int) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


class StubDelegate:
    """Delegate recording every call made by the authenticator."""

    def __init__(self, choice: int | None = 0, code: str | None = "123456") -> None:
        self.choice = choice
        self.code = code
        self.offered: list[list] = []
        self.codes_requested = 0
        self.saved_device_ids: list[str] = []

    def select_two_factor_preference(self, preferences):
        self.offered.append(preferences)
        return None if self.choice is None else preferences[self.choice]

    def get_two_factor_code(self):
        self.codes_requested += 1
        return self.code

    def save_device_id(self, device_id):
        self.saved_device_ids.append(device_id)


class AsyncStubDelegate(StubDelegate):
    """Same as StubDelegate but with coroutine methods."""

    async def select_two_factor_preference(self, preferences):
        return super().select_two_factor_preference(preferences)

    async def get_two_factor_code(self):
        return super().get_two_factor_code()

    async def save_device_id(self, device_id):
        super().save_device_id(device_id)


def make_account(**overrides: Any) -> dict[str, Any]:
    account = {
        "customer": {
            "customerId": "cust-1",
            "cardLast4": "1234",
            "customerType": "PRIMARY",
            "firstName": "Alice",
            "lastName": "Example",
        },
        "accountId": "acc-1",
        "accountType": "Personal",
        "paymentStatus": "Paid",
        "productName": "World Elite",
        "productExternalCode": "WE",
        "accountCurrency": "CAD",
        "brandId": "ROGERSBRAND",
        "openedDate": "2019-03-01",
        "previousStatementDate": "2024-05-15",
        "paymentDueDate": "2024-06-05",
        "lastPaymentDate": "2024-06-01",
        "cycleDates": ["2024-05-15", "2024-04-15", "2024-03-15"],
        "currentBalance": {"value": "120.50", "currency": "CAD"},
        "statementBalance": {"value": "300.00", "currency": "CAD"},
        "statementDueAmount": {"value": "0.00", "currency": "CAD"},
        "creditLimit": {"value": "10000.00", "currency": "CAD"},
        "lastPayment": {"value": "300.00", "currency": "CAD"},
        "realtimeBalance": {"value": "9879.50", "currency": "CAD"},
        "cashAvailable": {"value": "2000.00", "currency": "CAD"},
        "cashLimit": {"value": "2000.00", "currency": "CAD"},
        "multiCard": False,
    }
    account.update(overrides)
    return account


def make_user(user_name: str = "alice") -> dict[str, Any]:
    return {"userName": user_name, "authenticated": True, "accounts": [make_account()]}


def make_activity(**overrides: Any) -> dict[str, Any]:
    activity = {
        "referenceNumber": "REF123",
        "activityType": "TRANS",
        "activityStatus": "APPROVED",
        "activityCategory": "PURCHASE",
        "activityClassification": "PURCHASE",
        "cardNumber": "************1234",
        "date": "2024-05-10",
        "customerId": "cust-1",
        "postedDate": "2024-05-11",
        "merchant": {"name": "COFFEE SHOP", "category": "Restaurants"},
        "amount": {"value": "4.50", "currency": "CAD"},
    }
    activity.update(overrides)
    return activity


TWO_FACTOR_REQUIRED_BODY = {"status": 412, "title": "Device Not Found"}

PREFERENCES_BODY = {
    "preferences": [{"type": "email", "value": "a***@example.com"}],
    "cardLast4": "1234",
    "accountId": "acc-1",
    "customerId": "cust-1",
    "productName": "World Elite",
    "productExternalCode": "WE",
}


@pytest.fixture
def bank() -> FakeBank:
    return FakeBank()


@pytest_asyncio.fixture
async def client(bank: FakeBank):
    async with RogersBankClient(transport=httpx.MockTransport(bank.handler)) as client:
        yield client


@pytest.fixture
def delegate() -> StubDelegate:
    return StubDelegate()
