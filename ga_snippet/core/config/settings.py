"""Analytics snippet settings.

Uses Pydantic Settings for automatic env var loading:
    GOOGLE_ANALYTICS__ACCOUNT=UA-1234567-1
    GOOGLE_ANALYTICS__AUTO_PAGEVIEW=false
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ga_snippet.core.config.enums import AccountValidationMode


class RenderConfig(BaseModel):
    """Render-time switches, fixed at setup."""

    model_config = ConfigDict(frozen=True)

    prefix: str = ""
    auto_pageview: bool = True
    auto_render: bool = False
    include_loader: bool = True
    debug_mode: bool = False


class AnalyticsSettings(BaseSettings):
    """Component configuration, read once at startup."""

    model_config = SettingsConfigDict(
        env_prefix="GOOGLE_ANALYTICS__",
        extra="ignore",
    )

    account: str = Field("", description="Tracking account id, e.g. UA-1234567-1")
    prefix: str = Field("", description="Named tracker prefix, e.g. 't2'")
    auto_render: bool = Field(False, description="Register the snippet instead of returning it")
    auto_pageview: bool = Field(True, description="Add _trackPageview when none was queued")
    include_loader: bool = Field(True, description="Append the ga.js loader bootstrap")
    debug_mode: bool = Field(False, description="Load ga_debug.js and log dropped commands")
    account_validation: AccountValidationMode = Field(
        AccountValidationMode.WARN, description="Warn or raise on an invalid account id"
    )

    def render_config(self) -> RenderConfig:
        """Project the render-time switches out of the settings."""
        return RenderConfig(
            prefix=self.prefix,
            auto_pageview=self.auto_pageview,
            auto_render=self.auto_render,
            include_loader=self.include_loader,
            debug_mode=self.debug_mode,
        )
