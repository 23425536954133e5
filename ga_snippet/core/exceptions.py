"""Shared exceptions module."""

from typing import Optional


class GASnippetException(Exception):
    """Base exception for the snippet builder."""

    pass


class ConfigurationError(GASnippetException):
    """Exception raised when the analytics component is configured inconsistently."""

    def __init__(self, message: Optional[str] = "Invalid analytics configuration"):
        """Create a new ConfigurationError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class InvalidAccountIdError(ConfigurationError):
    """Exception raised when the tracking account id does not have the UA/MO shape."""

    def __init__(self, account: object, message: str = "Invalid Google Analytics account ID"):
        """Create a new InvalidAccountIdError instance.

        Args:
        ----
            account (object): The rejected value, as supplied.
            message (str, optional): The error message. Has default message.

        """
        self.account = account
        super().__init__(f"{message}: {account!r}")
