class SyncError(Exception):
    """Base class for errors raised while syncing a checkout to Webflow"""


class ConfigurationError(SyncError):
    pass


class ValidationError(SyncError):
    pass


class MissingIdentifyingFieldError(SyncError):
    """The collection has records without the identifying field"""

    def __init__(self, field):
        self.field = field
        super().__init__(
            f"Could not find the {field} field in Webflow. "
            "This field must exist and not be empty for all items in the collection."
        )


class ItemNotFoundError(SyncError):
    def __init__(self, code):
        self.code = code
        super().__init__(f"Item not found: {code}")


class MalformedLedgerError(SyncError):
    pass


class UnknownSizeError(SyncError):
    def __init__(self, size):
        self.size = size
        super().__init__(f"Size {size!r} is not listed in the inventory field")


class MissingOptionError(SyncError):
    def __init__(self, option, code=None):
        self.option = option
        self.code = code
        super().__init__(f"Line item {code} has no {option!r} option")
