"""Script registrar adapter.

Implements the ScriptRegistrar protocol with an in-process keyed registry.
"""

from ga_snippet.adapters.script_registrar.fake import FakeScriptRegistrar
from ga_snippet.adapters.script_registrar.in_memory import InMemoryScriptRegistrar

__all__ = ["InMemoryScriptRegistrar", "FakeScriptRegistrar"]
