"""Errors raised inside the bang resolution engine."""


class BangsError(Exception):
    """Base class for bang engine errors."""


class DatasetFetchError(BangsError):
    """The bang dataset document could not be fetched or parsed."""


class StoreAccessError(BangsError):
    """The durable store could not be read or written."""


class DispatchError(BangsError):
    """The host rejected a navigation request."""
