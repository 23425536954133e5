"""In-memory script registrar.

Collects scripts for one page render. The page template pulls them back
out per section with ``render_tags``.
"""

import logging
from typing import Dict, List

from ga_snippet.core.protocols.script_registrar import ScriptPosition

logger = logging.getLogger(__name__)


class InMemoryScriptRegistrar:
    """Keyed script registry, one instance per page render.

    Implements the ScriptRegistrar protocol. Insertion order of keys is
    kept; re-registering a key replaces its script and position in place.

    Usage:
        registrar = InMemoryScriptRegistrar()
        ga = initialize(settings, registrar=registrar)
        ga.render()
        head_html = registrar.render_tags(ScriptPosition.HEAD)
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._scripts: Dict[str, tuple[ScriptPosition, str]] = {}

    def register_script(self, key: str, script: str, position: ScriptPosition) -> None:
        """Store the script under key, replacing any earlier registration."""
        if key in self._scripts:
            logger.debug("Replacing registered script '%s'", key)
        self._scripts[key] = (ScriptPosition(position), script)

    def is_registered(self, key: str) -> bool:
        """Return True if a script is registered under key."""
        return key in self._scripts

    def get_script(self, key: str) -> str:
        """Return the script registered under key.

        Raises:
            KeyError: If nothing was registered under key.
        """
        return self._scripts[key][1]

    def scripts_for(self, position: ScriptPosition) -> List[str]:
        """Return the script bodies for a page section, in registration order."""
        return [script for pos, script in self._scripts.values() if pos == position]

    def render_tags(self, position: ScriptPosition) -> str:
        """Wrap every script for a section in its own <script> tag."""
        return "\n".join(
            f'<script type="text/javascript">\n{script}\n</script>'
            for script in self.scripts_for(position)
        )

    def clear(self) -> None:
        """Drop all registrations."""
        self._scripts.clear()
