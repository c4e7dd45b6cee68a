"""Errors raised while reading definition files such as the tile atlas."""


class DataError(Exception):
    """Base exception for definition file problems."""


class DataLoadError(DataError):
    """A definition file is missing, unreadable, empty or not JSON."""


class DataValidationError(DataError):
    """A definition file parsed but its shape is wrong (for example no biomes)."""
