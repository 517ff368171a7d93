import pytest


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def binary_headers():
    return {
        "ce-id": "A234-1234-1234",
        "ce-source": "https://github.com/cloudevents/spec/pull",
        "ce-specversion": "1.0",
        "ce-type": "com.github.pull_request.opened",
        "content-type": "application/json",
    }


@pytest.fixture
def envelope():
    return {
        "specversion": "1.0",
        "type": "com.example.order.created",
        "source": "/orders",
        "id": "order-1",
        "time": "2021-01-01T12:00:00Z",
        "data": {"order_id": 1, "total": 9.5},
    }
