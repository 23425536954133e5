"""Configuration enums for type-safe settings.

They inherit from str so values can come straight from env vars.
"""

from enum import Enum


class AccountValidationMode(str, Enum):
    """What to do with an account id that fails validation.

    WARN logs and carries on without queueing ``_setAccount``.
    RAISE aborts initialization with ``InvalidAccountIdError``.
    """

    WARN = "warn"
    RAISE = "raise"
