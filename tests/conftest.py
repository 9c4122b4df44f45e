import threading

import pytest

from config import Config


class FakeWebflowClient:
    """In-memory stand-in for WebflowClient that records its calls"""

    def __init__(self, records, total=None):
        self.records = records
        self.total = total
        self.fetch_calls = []
        self.patch_calls = []
        self._lock = threading.Lock()

    def fetch_page(self, collection_id, limit=100, offset=0, sort=None):
        with self._lock:
            self.fetch_calls.append({"collection_id": collection_id, "limit": limit,
                                     "offset": offset, "sort": sort})
        items = self.records[offset:offset + limit]
        total = len(self.records) if self.total is None else self.total
        return {"items": items, "total": total, "offset": offset, "count": len(items)}

    def patch_record(self, collection_id, record_id, fields, live=True):
        with self._lock:
            self.patch_calls.append({"collection_id": collection_id, "record_id": record_id,
                                     "fields": fields, "live": live})
        return {"_id": record_id, **fields}


def _make_records(count, start=0, inventory="S:10,M:5"):
    return [
        {"_id": f"id-{i:04d}", "code": f"P{i:04d}", "size-quantity": inventory}
        for i in range(start, start + count)
    ]


@pytest.fixture
def fake_client_factory():
    return FakeWebflowClient


@pytest.fixture
def config():
    return Config({
        "WEBFLOW_TOKEN": "token",
        "WEBFLOW_COLLECTION_ID": "c1",
        "MAX_WORKERS": "4",
    })


@pytest.fixture
def make_records():
    return _make_records
