"""
Size inventory stored in a single Webflow text field.

The field holds ``size:quantity`` pairs separated by commas, e.g.
``S:10,M:5,L:0``. Quantities stay strings in the ledger and are only turned
into numbers while decrementing.
"""
from errors import MalformedLedgerError, UnknownSizeError


def parse(value):
    """
    Parse the inventory field into an ordered size -> quantity dict.

    Whitespace around sizes and quantities is dropped, so ``S:10, M:5`` is
    written back as ``S:10,M:5``.
    """
    if not isinstance(value, str):
        raise MalformedLedgerError(f"Inventory field must be a string, got {value!r}")

    ledger = {}
    for token in value.split(","):
        size, sep, quantity = token.partition(":")
        if not sep:
            raise MalformedLedgerError(f"Inventory entry {token!r} has no ':' separator")
        ledger[size.strip()] = quantity.strip()
    return ledger


def _to_number(value):
    if isinstance(value, (int, float)):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        return float(value)
    except (TypeError, ValueError):
        raise MalformedLedgerError(f"Quantity {value!r} is not a number")


def decrement(ledger, size, quantity):
    """
    Return a copy of the ledger with `quantity` taken off `size`.

    A size whose quantity is exactly the string "0" is left alone. Any other
    quantity is decremented and may go negative.
    """
    if size not in ledger:
        raise UnknownSizeError(size)

    updated = dict(ledger)
    if updated[size] == "0":
        return updated

    remaining = _to_number(updated[size]) - _to_number(quantity)
    if isinstance(remaining, float) and remaining.is_integer():
        remaining = int(remaining)
    updated[size] = str(remaining)
    return updated


def serialize(ledger):
    return ",".join(f"{size}:{quantity}" for size, quantity in ledger.items())
