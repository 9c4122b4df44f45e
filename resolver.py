"""
Find the Webflow item that matches a FoxyCart line item.

Webflow has no documented way to filter collection items by an arbitrary
field, so the collection is walked page by page (sorted by the identifying
field) until the item turns up. This takes time linear in the size of the
collection, so the search gives up past a fixed offset.
"""
import logging

from errors import ItemNotFoundError, MissingIdentifyingFieldError
from fields import get_field
from item_cache import same_code

logger = logging.getLogger(__name__)

WEBFLOW_LIMIT = 100
MAX_OFFSET = 500


class CollectionResolver:
    def __init__(self, client, collection_id, id_field="code", page_size=WEBFLOW_LIMIT,
                 max_offset=MAX_OFFSET):
        self.client = client
        self.collection_id = collection_id
        self.id_field = id_field
        self.page_size = page_size
        self.max_offset = max_offset

    def resolve(self, cache, line_item):
        """Return the record for `line_item`, fetching pages until it is found"""
        code = line_item.get("code")
        offset = 0
        while True:
            if offset > self.max_offset:
                logger.info("   ... giving up on %s.", code)
                raise ItemNotFoundError(code)
            if offset:
                logger.info("   ... couldn't find %s in the first %s items.", code, offset)

            found = cache.find_item(self.collection_id, line_item)
            if found is not None:
                return found

            page = self.client.fetch_page(
                self.collection_id,
                limit=self.page_size,
                offset=offset,
                sort=(self.id_field, "ASC"),
            )
            items = page.get("items") or []
            cache.add_items(self.collection_id, items)

            match = self._scan(items, code)
            if match is not None:
                return match

            if page.get("total", 0) > page.get("offset", offset) + page.get("count", len(items)):
                offset += self.page_size
                continue
            raise ItemNotFoundError(code)

    def _scan(self, items, code):
        code_exists = None
        for record in items:
            record_code = get_field(record, self.id_field)
            if record_code is None:
                if code_exists is None:
                    code_exists = False
                continue
            code_exists = True
            if same_code(record_code, code):
                return record

        if code_exists is False:
            raise MissingIdentifyingFieldError(self.id_field)
        return None
