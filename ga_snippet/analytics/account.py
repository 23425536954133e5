"""Tracking account id validation."""

import logging
import re
from typing import Optional

from ga_snippet.core.config.enums import AccountValidationMode
from ga_snippet.core.exceptions import InvalidAccountIdError

logger = logging.getLogger(__name__)

ACCOUNT_ID_PATTERN = re.compile(r"^(UA|MO)-\d{4,10}-\d{1,3}$", re.IGNORECASE)


def parse_account_id(raw: object) -> Optional[str]:
    """Return the upper-cased account id, or None if it is not UA-/MO- shaped."""
    # fullmatch so a trailing newline is not accepted by "$"
    if isinstance(raw, str) and ACCOUNT_ID_PATTERN.fullmatch(raw):
        return raw.upper()
    return None


class AccountValidator:
    """Validates the configured account id once and keeps the result.

    After a successful validation every further call returns the stored id
    untouched, whatever it is given.
    """

    def __init__(
        self,
        mode: AccountValidationMode = AccountValidationMode.WARN,
        logger: logging.Logger = logger,
    ) -> None:
        """Set how rejected ids are reported."""
        self._mode = AccountValidationMode(mode)
        self._logger = logger
        self._account_id: Optional[str] = None

    @property
    def account_id(self) -> Optional[str]:
        """The accepted id, or None before a successful validation."""
        return self._account_id

    def validate(self, raw: object) -> Optional[str]:
        """Validate raw and remember it on success.

        Raises:
            InvalidAccountIdError: In RAISE mode, when raw is rejected.
        """
        if self._account_id is not None:
            return self._account_id

        account_id = parse_account_id(raw)
        if account_id is None:
            if self._mode == AccountValidationMode.RAISE:
                raise InvalidAccountIdError(raw)
            self._logger.warning("Invalid Google Analytics account ID: %r", raw)
            return None

        self._account_id = account_id
        return account_id
