"""Lookups on loosely structured FoxyCart and Webflow records"""
import re


def get_field(record, key):
    """
    Return the value of `key` from `record`, ignoring case and surrounding
    whitespace. Field names with a numeric suffix (``Code-2``) also match.
    When several fields match, the smallest field name wins.
    """
    pattern = re.compile(re.escape(key.lower().strip()) + r"(-\d+)?")
    candidates = sorted(k for k in record if pattern.fullmatch(k.lower().strip()))
    if not candidates:
        return None
    return record[candidates[0]]


def get_option(item, option):
    """
    Return ``{"name": ..., "value": ...}`` for an item option, or ``{}``.

    The option is looked up on the item itself first, then in
    ``_embedded["fx:item_options"]``.
    """
    found = get_field(item, option)
    if found:
        return {"name": option, "value": found}

    embedded = item.get("_embedded") or {}
    wanted = option.lower().strip()
    for entry in embedded.get("fx:item_options") or []:
        if str(entry.get("name", "")).lower().strip() == wanted:
            return entry
    return {}
