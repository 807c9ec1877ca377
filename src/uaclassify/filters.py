"""Second-pass correction rules for known User-Agent ambiguities.

Each filter is a pure function ``ParseResult -> ParseResult``. FILTER_CHAIN
applies them in a fixed order and every filter always runs; guards read the
*current* record, so a later filter sees what an earlier one just set.
"""

import logging
import re
from collections.abc import Callable

from uaclassify.definition import YAHOO_BOT_LABEL
from uaclassify.models import ParseResult

logger = logging.getLogger(__name__)

Filter = Callable[[ParseResult], ParseResult]

_RV_VERSION_RE = re.compile(r"rv:(\d+(?:\.\d+)+)")
# The last " Version/" token carries the real version
_VERSION_TOKEN_RE = re.compile(r" version/(\d+(?:\.\d+)?)", re.IGNORECASE)
_ANDROID_RE = re.compile(r"Android \d+(?:\.\d+)*")


def filter_bots(result: ParseResult) -> ParseResult:
    """Yahoo's crawler announces itself without a name/version phrase."""
    if result.browser_name is None and "yahoo! slurp" in result.raw_string.lower():
        logger.debug("Bot filter: '%s' -> %s", result.raw_string, YAHOO_BOT_LABEL)
        return result.model_copy(update={"browser_name": YAHOO_BOT_LABEL})
    return result


def filter_browser_names(result: ParseResult) -> ParseResult:
    """IE 11 dropped the MSIE token; recognise it by Trident plus ``rv:``."""
    if (
        result.browser_name is None
        and result.browser_engine == "trident"
        and "rv:" in result.raw_string
    ):
        match = _RV_VERSION_RE.search(result.raw_string)
        version = match.group(1) if match else None
        logger.debug("Browser name filter: trident + rv: -> msie %s", version)
        return result.model_copy(
            update={"browser_name": "msie", "browser_version": version}
        )
    return result


def filter_browser_versions(result: ParseResult) -> ParseResult:
    """Safari and Opera 10+ put the real version in a ``Version/`` token."""
    if result.browser_name not in ("safari", "opera"):
        return result
    if " version/" not in result.raw_string.lower():
        return result

    versions = _VERSION_TOKEN_RE.findall(result.raw_string)
    if not versions:
        return result

    logger.debug(
        "Browser version filter: %s %s -> %s",
        result.browser_name,
        result.browser_version,
        versions[-1],
    )
    return result.model_copy(update={"browser_version": versions[-1]})


def filter_browser_engines(result: ParseResult) -> ParseResult:
    """MSIE does not always declare Trident."""
    if result.browser_name == "msie" and result.browser_engine is None:
        return result.model_copy(update={"browser_engine": "trident"})
    return result


def filter_operating_systems(result: ParseResult) -> ParseResult:
    """Prefer ``Android <version>`` over the bare Android/Linux table label."""
    if "Android " not in result.raw_string:
        return result

    match = _ANDROID_RE.search(result.raw_string)
    if match is None:
        return result

    return result.model_copy(update={"operating_system": match.group(0)})


def filter_devices(result: ParseResult) -> ParseResult:
    return result


FILTER_CHAIN: tuple[Filter, ...] = (
    filter_bots,
    filter_browser_names,
    filter_browser_versions,
    filter_browser_engines,
    filter_operating_systems,
    filter_devices,
)


def apply_filters(
    result: ParseResult,
    filters: tuple[Filter, ...] = FILTER_CHAIN,
) -> ParseResult:
    """Fold ``filters`` over ``result`` in order."""
    for filter_fn in filters:
        result = filter_fn(result)
    return result
