import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

import size_ledger
from errors import ConfigurationError, MissingOptionError, SyncError, ValidationError
from fields import get_option
from foxy_webhook import extract_items, valid_foxy_request
from item_cache import ItemCache
from resolver import CollectionResolver
from slack_notify import send_slack_notification
from webflow_api import WebflowClient

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "An internal error has occurred"


class InventoryReconciler:
    """Decrements Webflow size inventory for FoxyCart line items"""

    def __init__(self, client, resolver, collection_id, inventory_field="size-quantity",
                 size_option="size", live=True, max_workers=8):
        self.client = client
        self.resolver = resolver
        self.collection_id = collection_id
        self.inventory_field = inventory_field
        self.size_option = size_option
        self.live = live
        self.max_workers = max_workers
        self.outcomes = []

    def reconcile_line_item(self, cache, line_item):
        info = {
            "code": line_item.get("code"),
            "quantity": line_item.get("quantity"),
            "size": get_option(line_item, self.size_option),
        }
        logger.info("Going through this item, %s", info)
        try:
            if "value" not in info["size"]:
                raise MissingOptionError(self.size_option, info["code"])
            if info["quantity"] in (None, ""):
                raise MissingOptionError("quantity", info["code"])

            record = self.resolver.resolve(cache, info)
            logger.info("Fetched item %s from Webflow for %s", record.get("_id"), info["code"])

            ledger = size_ledger.parse(record.get(self.inventory_field))
            ledger = size_ledger.decrement(ledger, str(info["size"]["value"]).strip(), info["quantity"])
            value = size_ledger.serialize(ledger)

            # cached records are shared between line items
            patched = dict(record)
            patched[self.inventory_field] = value
            logger.debug("Patched item to send: %s", patched)

            result = self.client.patch_record(
                self.collection_id, patched["_id"], {self.inventory_field: value}, live=self.live
            )
        except Exception as e:
            self.outcomes.append((info["code"], False, str(e)))
            raise

        if not result:
            result = {"_id": patched["_id"], self.inventory_field: value}
        self.outcomes.append((info["code"], True, value))
        return result

    def reconcile_all(self, cache, line_items):
        """
        Reconcile every line item concurrently against one cache.

        Results come back in line item order. The first failure is raised and
        items that have not started yet are cancelled; patches already written
        stay written.
        """
        if not line_items:
            return []

        workers = max(1, min(self.max_workers, len(line_items)))
        with ThreadPoolExecutor(max_workers=workers) as ex:
            futures = [ex.submit(self.reconcile_line_item, cache, item) for item in line_items]
            try:
                for fut in as_completed(futures):
                    fut.result()
            except Exception:
                for fut in futures:
                    fut.cancel()
                raise
        return [fut.result() for fut in futures]


def _response(status, **body):
    return body, status


def _summary(outcomes):
    lines = []
    for code, ok, detail in outcomes:
        if ok:
            lines.append(f"✅ {code}: now {detail}")
        else:
            lines.append(f"❌ {code}: failed ({detail})")
    return "\n".join(lines)


def _check_request(event, config):
    if not config.WEBFLOW_TOKEN:
        raise ConfigurationError("Webflow token not configured.")
    if not config.WEBFLOW_COLLECTION_ID:
        raise ConfigurationError("Webflow collection not configured.")

    error = valid_foxy_request(event, config.FOXY_WEBHOOK_ENCRYPTION_KEY)
    if error:
        raise ValidationError(error)
    return extract_items(event["body"])


def handle_checkout(event, config, client=None, notifier=None):
    """
    Handle a FoxyCart checkout webhook.
    Logic: Decrement the purchased size in Webflow for each line item
    Returns (body, status_code).
    """
    notifier = notifier or send_slack_notification
    try:
        items = _check_request(event, config)
    except ConfigurationError as e:
        return _response(503, ok=False, details=str(e))
    except ValidationError as e:
        return _response(400, ok=False, details=str(e))
    logger.info("Passed validation")

    if client is None:
        client = WebflowClient(config.WEBFLOW_TOKEN, config.WEBFLOW_BASE_URL, config.WEBFLOW_TIMEOUT)
    cache = ItemCache(config.WEBFLOW_CODE_FIELD)
    resolver = CollectionResolver(
        client,
        config.WEBFLOW_COLLECTION_ID,
        id_field=config.WEBFLOW_CODE_FIELD,
        page_size=config.WEBFLOW_PAGE_SIZE,
        max_offset=config.WEBFLOW_MAX_OFFSET,
    )
    reconciler = InventoryReconciler(
        client,
        resolver,
        config.WEBFLOW_COLLECTION_ID,
        inventory_field=config.WEBFLOW_INVENTORY_FIELD,
        size_option=config.FOXY_SIZE_OPTION,
        live=config.WEBFLOW_LIVE,
        max_workers=config.MAX_WORKERS,
    )

    try:
        patched_items = reconciler.reconcile_all(cache, items)
    except SyncError as e:
        logger.error("Checkout sync failed: %s", e)
        return _failed(e, reconciler, config, notifier)
    except Exception as e:
        logger.exception("Checkout sync failed")
        return _failed(e, reconciler, config, notifier)

    logger.info("Patched Items: %s", patched_items)
    if patched_items:
        notifier("📦 *Checkout synced*\n" + _summary(reconciler.outcomes), config.SLACK_WEBHOOK_URL)
    return _response(200, ok=True, patchedItems=patched_items)


def _failed(error, reconciler, config, notifier):
    notifier(
        f"🚨 *Checkout sync failed*: {error}\n" + _summary(reconciler.outcomes),
        config.SLACK_WEBHOOK_URL,
    )
    return _response(500, ok=False, details=INTERNAL_ERROR)
