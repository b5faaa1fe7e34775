"""
Error taxonomy for the employee tracker backend.
"""


class TrackerError(Exception):
    """Base class for all tracker errors."""


class ConfigurationError(TrackerError):
    """A required setting is missing or empty. Fatal at startup."""


class DatabaseConnectionError(TrackerError):
    """The store cannot be reached or rejected the credentials. Fatal at startup."""


class StatementError(TrackerError):
    """A statement was malformed or violated a store constraint."""
