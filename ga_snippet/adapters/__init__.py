"""Infrastructure adapters.

Adapters implement protocols defined in core/protocols/.
"""
