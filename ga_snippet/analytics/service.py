"""Google Analytics page component.

One instance per page render: it validates the account id, collects
``_gaq`` commands while the page is built, and renders the snippet at the
end, either returned to the caller or registered for the page head.

Usage:
    ga = initialize(AnalyticsSettings(account="UA-1234567-1"))
    ga.trackEvent("Videos", "Play", "intro")
    html_head += ga.render()
"""

import functools
import logging
from typing import Callable, Optional, Tuple, Union

from ga_snippet.analytics.account import AccountValidator
from ga_snippet.analytics.commands import ArgValue, Command, CommandInvocation, resolve_command
from ga_snippet.analytics.recorder import CommandRecorder
from ga_snippet.analytics.renderer import render_snippet
from ga_snippet.core.config import settings as default_settings
from ga_snippet.core.config.settings import AnalyticsSettings, RenderConfig
from ga_snippet.core.exceptions import ConfigurationError
from ga_snippet.core.protocols.script_registrar import ScriptPosition, ScriptRegistrar

logger = logging.getLogger(__name__)

SCRIPT_KEY = "TPGoogleAnalytics"


class GoogleAnalytics:
    """Account id, command queue and render switches for one page.

    Build it through ``initialize``. Allow-listed commands can be called
    directly on the instance (``ga.trackPageview("/virtual")``); they are
    forwarded to the underlying recorder.
    """

    def __init__(
        self,
        settings: AnalyticsSettings,
        registrar: Optional[ScriptRegistrar] = None,
        logger: logging.Logger = logger,
    ) -> None:
        """Wire collaborators; does not validate anything yet."""
        self._settings = settings
        self._config: RenderConfig = settings.render_config()
        self._registrar = registrar
        self._logger = logger
        self._validator = AccountValidator(settings.account_validation, logger=logger)
        self._recorder = CommandRecorder(debug_mode=settings.debug_mode, logger=logger)

        if self._config.auto_render and registrar is None:
            raise ConfigurationError("auto_render is enabled but no script registrar was given")

    def setup(self) -> None:
        """Validate the account id and queue ``_setAccount`` when it is valid."""
        account_id = self._validator.validate(self._settings.account)
        if account_id is not None and not self._recorder.has_called(Command.SET_ACCOUNT):
            self._recorder.record(Command.SET_ACCOUNT, account_id)

    @property
    def account_id(self) -> Optional[str]:
        """The validated account id, if any."""
        return self._validator.account_id

    @property
    def config(self) -> RenderConfig:
        """Render-time switches."""
        return self._config

    @property
    def invocations(self) -> Tuple[CommandInvocation, ...]:
        """Queued commands, oldest first."""
        return self._recorder.invocations

    def record(self, name: Union[str, Command], *args: ArgValue) -> bool:
        """Queue a command; returns False if it is not allow-listed."""
        return self._recorder.record(name, *args)

    def reset(self) -> None:
        """Empty the queue, keeping ``_setAccount`` if the account id is valid."""
        self._recorder.clear()
        if self.account_id is not None:
            self._recorder.record(Command.SET_ACCOUNT, self.account_id)

    def render(self) -> Optional[str]:
        """Render the snippet.

        Returns:
            The snippet, or None when it was handed to the script registrar.
        """
        js = render_snippet(self._recorder.invocations, self._config)

        if self._config.auto_render:
            self._registrar.register_script(SCRIPT_KEY, js, ScriptPosition.HEAD)
            self._logger.debug("Registered Google Analytics snippet as '%s'", SCRIPT_KEY)
            return None
        return js

    def __getattr__(self, name: str) -> Callable[..., bool]:
        if name.startswith("__"):
            raise AttributeError(name)
        command = resolve_command(name)
        if command is None:
            raise AttributeError(f"{type(self).__name__!r} has no command {name!r}")
        return functools.partial(self.record, command)


def initialize(
    settings: Optional[AnalyticsSettings] = None,
    registrar: Optional[ScriptRegistrar] = None,
    logger: logging.Logger = logger,
) -> GoogleAnalytics:
    """Build and set up a component.

    Args:
        settings: Component settings; the env-loaded singleton when omitted.
        registrar: Required when ``auto_render`` is enabled.
        logger: Sink for diagnostics.

    Raises:
        InvalidAccountIdError: Account id rejected in RAISE mode.
        ConfigurationError: auto_render without a registrar.
    """
    component = GoogleAnalytics(settings or default_settings, registrar=registrar, logger=logger)
    component.setup()
    return component
