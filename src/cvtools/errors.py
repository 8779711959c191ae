"""Exceptions raised by cvtools helpers and reported by the command-line tools."""


class CvToolsError(Exception):
    """Base class for errors reported as ``[ERROR] <message>``."""


class InvalidOptionError(CvToolsError, ValueError):
    """A command-line option has an unsupported value."""


class StorageError(CvToolsError):
    """A FileStorage file could not be opened, read or written."""
