"""
Per-request cache of Webflow collection items.

The cache lives for a single webhook invocation and lets line items from the
same order reuse pages already fetched for other line items.
"""
import threading

from fields import get_field


def same_code(record_code, item_code):
    if record_code is None or item_code is None:
        return False
    record_code = str(record_code).strip()
    item_code = str(item_code).strip()
    return bool(record_code) and record_code == item_code


class ItemCache:
    def __init__(self, id_field="code"):
        self.id_field = id_field
        self._items = {}
        self._locks = {}
        self._guard = threading.Lock()

    def _lock_for(self, collection_id):
        with self._guard:
            return self._locks.setdefault(collection_id, threading.Lock())

    def add_items(self, collection_id, items):
        """Append fetched items to the collection's cached list"""
        with self._lock_for(collection_id):
            self._items.setdefault(collection_id, []).extend(items)

    def find_item(self, collection_id, line_item):
        """Return the cached record matching the line item's code, or None"""
        with self._lock_for(collection_id):
            for record in self._items.get(collection_id, ()):
                if same_code(get_field(record, self.id_field), line_item.get("code")):
                    return record
        return None
