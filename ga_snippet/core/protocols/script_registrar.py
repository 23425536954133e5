"""ScriptRegistrar protocol for page script placement.

The host page template owns where scripts end up. The analytics component
only hands over a keyed script body and the section it belongs in.

Usage:
    registrar.register_script("TPGoogleAnalytics", js, ScriptPosition.HEAD)
"""

from enum import Enum
from typing import Protocol, runtime_checkable


class ScriptPosition(str, Enum):
    """Page section a registered script is placed in."""

    HEAD = "head"
    BEGIN = "begin"
    END = "end"


@runtime_checkable
class ScriptRegistrar(Protocol):
    """Protocol for registering inline scripts with the host page."""

    def register_script(self, key: str, script: str, position: ScriptPosition) -> None:
        """Register a script body under a key.

        Args:
            key: Registration key. Registering the same key again replaces the script.
            script: JavaScript source, without the surrounding <script> tag.
            position: Page section the script is emitted in.
        """
        ...
