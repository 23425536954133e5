"""Google Analytics ``_gaq`` snippet component."""

from .account import ACCOUNT_ID_PATTERN, AccountValidator, parse_account_id
from .commands import ALLOWED_COMMANDS, Command, CommandInvocation, resolve_command
from .recorder import CommandRecorder
from .renderer import render_snippet
from .service import SCRIPT_KEY, GoogleAnalytics, initialize

__all__ = [
    "ACCOUNT_ID_PATTERN",
    "ALLOWED_COMMANDS",
    "AccountValidator",
    "Command",
    "CommandInvocation",
    "CommandRecorder",
    "GoogleAnalytics",
    "SCRIPT_KEY",
    "initialize",
    "parse_account_id",
    "render_snippet",
    "resolve_command",
]
