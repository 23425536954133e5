"""Tracking command vocabulary for the ga.js ``_gaq`` queue.

Names and ordering follow the ga.js method reference as of May 2012:
https://developers.google.com/analytics/devguides/collection/gajs/methods/
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

COMMAND_MARKER = "_"

# Values a queued command may carry. bool is checked before int when rendering.
ArgValue = Union[str, bool, int, float, None]


class Command(str, Enum):
    """Allow-listed ``_gaq`` commands."""

    ADD_IGNORED_ORGANIC = "_addIgnoredOrganic"
    ADD_IGNORED_REF = "_addIgnoredRef"
    ADD_ITEM = "_addItem"
    ADD_ORGANIC = "_addOrganic"
    ADD_TRANS = "_addTrans"
    ANONYMIZE_IP = "_anonymizeIp"
    CLEAR_IGNORED_ORGANIC = "_clearIgnoredOrganic"
    CLEAR_IGNORED_REF = "_clearIgnoredRef"
    CLEAR_ORGANIC = "_clearOrganic"
    COOKIE_PATH_COPY = "_cookiePathCopy"
    CREATE_TRACKER = "_createTracker"
    DELETE_CUSTOM_VAR = "_deleteCustomVar"
    # TODO: _link and _linkByPost return values the page uses inline; they need
    # an onclick/onsubmit helper rather than a queued push.
    SET_ACCOUNT = "_setAccount"
    SET_ALLOW_ANCHOR = "_setAllowAnchor"
    SET_ALLOW_LINKER = "_setAllowLinker"
    SET_CAMP_CONTENT_KEY = "_setCampContentKey"
    SET_CAMP_MEDIUM_KEY = "_setCampMediumKey"
    SET_CAMP_NO_KEY = "_setCampNOKey"
    SET_CAMP_NAME_KEY = "_setCampNameKey"
    SET_CAMP_SOURCE_KEY = "_setCampSourceKey"
    SET_CAMP_TERM_KEY = "_setCampTermKey"
    SET_CAMPAIGN_COOKIE_TIMEOUT = "_setCampaignCookieTimeout"
    SET_CAMPAIGN_TRACK = "_setCampaignTrack"
    SET_CLIENT_INFO = "_setClientInfo"
    SET_COOKIE_PATH = "_setCookiePath"
    SET_CUSTOM_VAR = "_setCustomVar"
    SET_DETECT_FLASH = "_setDetectFlash"
    SET_DETECT_TITLE = "_setDetectTitle"
    SET_DOMAIN_NAME = "_setDomainName"
    SET_LOCAL_GIF_PATH = "_setLocalGifPath"
    SET_LOCAL_REMOTE_SERVER_MODE = "_setLocalRemoteServerMode"
    SET_LOCAL_SERVER_MODE = "_setLocalServerMode"
    SET_REFERRER_OVERRIDE = "_setReferrerOverride"
    SET_REMOTE_SERVER_MODE = "_setRemoteServerMode"
    SET_SAMPLE_RATE = "_setSampleRate"
    SET_SESSION_COOKIE_TIMEOUT = "_setSessionCookieTimeout"
    SET_SITE_SPEED_SAMPLE_RATE = "_setSiteSpeedSampleRate"
    SET_VISITOR_COOKIE_TIMEOUT = "_setVisitorCookieTimeout"
    TRACK_EVENT = "_trackEvent"
    TRACK_PAGEVIEW = "_trackPageview"
    TRACK_SOCIAL = "_trackSocial"
    TRACK_TIMING = "_trackTiming"
    TRACK_TRANS = "_trackTrans"


ALLOWED_COMMANDS = frozenset(c.value for c in Command)


def normalize_command_name(name: str) -> str:
    """Ensure exactly one leading marker is present (``trackEvent`` -> ``_trackEvent``)."""
    if name.startswith(COMMAND_MARKER):
        return name
    return COMMAND_MARKER + name


def resolve_command(name: Union[str, Command]) -> Optional[Command]:
    """Look up a command by name, case-sensitively.

    Returns None for anything off the allow-list.
    """
    if isinstance(name, Command):
        return name
    if not isinstance(name, str) or not name:
        return None
    normalized = normalize_command_name(name)
    if normalized not in ALLOWED_COMMANDS:
        return None
    return Command(normalized)


@dataclass(frozen=True)
class CommandInvocation:
    """One accepted command call, as queued.

    Arguments are stored as given; nothing checks their count or type at runtime.
    """

    name: Command
    args: Tuple[ArgValue, ...] = ()
