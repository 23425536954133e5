"""Serializes queued commands into the classic async ga.js snippet.

Output shape:

    var _gaq = _gaq || [];
    _gaq.push(['_setAccount','UA-XXXXX-X']);
    _gaq.push(['_trackPageview']);
    (function() { ... loader ... })();
    // banner

The quoting rule for string arguments is kept exactly as the component has
always emitted it. Arguments after the first one get the tracker prefix
right inside the opening quote, and unescaped quotes inside them become
backslash + prefix + quote. With an empty prefix this is plain ``\\'``.
"""

import math
import re
from typing import Any, Iterable, List

from ga_snippet.analytics.commands import Command, CommandInvocation
from ga_snippet.core.config.settings import RenderConfig

QUOTE = "'"
PREFIX_SEPARATOR = "."
LINE_SEPARATOR = "\n"

QUEUE_INIT = "var _gaq = _gaq || [];"

LOADER_FILE = "/ga.js"
DEBUG_LOADER_FILE = "/u/ga_debug.js"

LOADER_TEMPLATE = """(function() {
    var ga = document.createElement('script'); ga.type = 'text/javascript'; ga.async = true;
    ga.src = ('https:' == document.location.protocol ? 'https://ssl' : 'http://www') + '.google-analytics.com%s';
    var s = document.getElementsByTagName('script')[0]; s.parentNode.insertBefore(ga, s);
})();"""

COPYRIGHT_BANNER = """// Google Analytics Extension provided by TagPla.net
// https://github.com/TagPlanet/yii-analytics
// Copyright 2012, TagPla.net & Philip Lawrence"""

# A quote not already escaped by a backslash.
_UNESCAPED_QUOTE = re.compile(r"(?<!\\)" + re.escape(QUOTE))


def normalize_prefix(prefix: str) -> str:
    """Return prefix with a trailing separator, or "" when there is no prefix."""
    if not prefix:
        return ""
    if prefix.endswith(PREFIX_SEPARATOR):
        return prefix
    return prefix + PREFIX_SEPARATOR


def quote_string(value: str, prefix: str = "", prefixed: bool = False) -> str:
    """Quote value as a JS string literal.

    Args:
        value: Raw string.
        prefix: Normalized tracker prefix.
        prefixed: False for the command name and the first argument, True after that.
    """
    inner_prefix = prefix if prefixed else ""
    escaped = _UNESCAPED_QUOTE.sub(lambda _: "\\" + inner_prefix + QUOTE, value)
    return QUOTE + inner_prefix + escaped + QUOTE


def format_argument(value: Any, prefix: str = "", position: int = 0) -> str:
    """Render one command argument; position counts from 0 within the arguments."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return quote_string(value, prefix, prefixed=position > 0)
    if value is None:
        return "null"
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    return str(value)


def render_push(invocation: CommandInvocation, prefix: str = "") -> str:
    """Render a single ``_gaq.push([...]);`` statement."""
    rendered = [quote_string(invocation.name.value)]
    rendered.extend(
        format_argument(arg, prefix, position) for position, arg in enumerate(invocation.args)
    )
    return "_gaq.push([" + ",".join(rendered) + "]);"


def render_loader(debug_mode: bool = False) -> str:
    """Render the bootstrap that inserts the ga.js <script> tag."""
    return LOADER_TEMPLATE % (DEBUG_LOADER_FILE if debug_mode else LOADER_FILE)


def with_auto_pageview(
    invocations: Iterable[CommandInvocation], auto_pageview: bool = True
) -> List[CommandInvocation]:
    """Copy invocations, appending ``_trackPageview`` if enabled and none is queued."""
    result = list(invocations)
    if auto_pageview and not any(i.name == Command.TRACK_PAGEVIEW for i in result):
        result.append(CommandInvocation(name=Command.TRACK_PAGEVIEW))
    return result


def render_snippet(invocations: Iterable[CommandInvocation], config: RenderConfig) -> str:
    """Render the full snippet body for the given queue.

    The caller's queue is never modified, so rendering twice gives the
    same output.
    """
    prefix = normalize_prefix(config.prefix)
    lines = [QUEUE_INIT]
    lines.extend(
        render_push(invocation, prefix)
        for invocation in with_auto_pageview(invocations, config.auto_pageview)
    )
    if config.include_loader:
        lines.append(render_loader(config.debug_mode))
    lines.append(COPYRIGHT_BANNER)
    return LINE_SEPARATOR.join(lines)
