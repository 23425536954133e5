"""Fake script registrar for testing."""

from dataclasses import dataclass

from ga_snippet.core.protocols.script_registrar import ScriptPosition


@dataclass
class RegisteredScript:
    """Single recorded register_script call."""

    key: str
    script: str
    position: ScriptPosition


class FakeScriptRegistrar:
    """In-memory test double for ScriptRegistrar.

    Records every call, including repeated keys.

    Usage:
        registrar = FakeScriptRegistrar()
        initialize(settings, registrar=registrar).render()
        assert registrar.has("TPGoogleAnalytics")
    """

    def __init__(self) -> None:
        """Initialize with empty call list."""
        self.calls: list[RegisteredScript] = []

    def register_script(self, key: str, script: str, position: ScriptPosition) -> None:
        """Record the call for later assertions."""
        self.calls.append(RegisteredScript(key=key, script=script, position=position))

    def has(self, key: str) -> bool:
        """Return True if a script was registered under key."""
        return any(c.key == key for c in self.calls)

    def get(self, key: str) -> RegisteredScript:
        """Return the first registration for key, or raise AssertionError."""
        for c in self.calls:
            if c.key == key:
                return c
        raise AssertionError(
            f"No script registered under '{key}'. Registered: {[c.key for c in self.calls]}"
        )

    def clear(self) -> None:
        """Reset recorded calls."""
        self.calls.clear()
