"""Protocols for the collaborators the analytics component depends on."""

from ga_snippet.core.protocols.script_registrar import ScriptPosition, ScriptRegistrar

__all__ = ["ScriptPosition", "ScriptRegistrar"]
