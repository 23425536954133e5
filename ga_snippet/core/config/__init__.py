"""Configuration module for the snippet builder.

Usage:
    from ga_snippet.core.config import settings, AccountValidationMode

    if settings.account_validation == AccountValidationMode.RAISE:
        ...
"""

from ga_snippet.core.config.enums import AccountValidationMode
from ga_snippet.core.config.settings import AnalyticsSettings, RenderConfig

__all__ = [
    "AnalyticsSettings",
    "AccountValidationMode",
    "RenderConfig",
    "settings",
]

# Singleton settings instance
settings = AnalyticsSettings()
