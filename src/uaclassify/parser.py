"""User-Agent string classifier.

Provides:
- Classifier: two-pass classification against a knowledge base
- classify: module-level shortcut using the default knowledge base

Pass one (structural extraction) scans each pattern table in order and keeps
the first matching entry. Pass two (strict mode only) folds the filter chain
from ``uaclassify.filters`` over the result to fix known ambiguities.

Usage::

    from uaclassify.parser import classify

    result = classify("Mozilla/5.0 (Windows NT 6.1; WOW64; Trident/7.0; rv:11.0) like Gecko")
    result.browser_name     # "msie"
    result.browser_version  # "11.0"
"""

import logging
import re
from dataclasses import dataclass

from uaclassify.config import ClassifierConfig
from uaclassify.definition import (
    DEFAULT_DEFINITION,
    PLACEHOLDER,
    KnowledgeBase,
    PatternTable,
)
from uaclassify.exceptions import InvalidUserAgentString
from uaclassify.filters import FILTER_CHAIN, Filter, apply_filters
from uaclassify.models import DEFAULT_DEVICE, ParseResult

logger = logging.getLogger(__name__)

# Name/version phrase, e.g. "Firefox/2.0" or "MSIE 6.0". Only major and
# minor are captured, so "2.0.0.6" yields "2.0".
_VERSION_SUFFIX = r"[/ ]+(\d+(?:\.\d+)?)"

# Skip compatibility noise such as "like Gecko" or "like Mac OS X"
_NOT_LIKE = r"(?<!like )"


@dataclass(frozen=True)
class CompiledEntry:
    """One table entry with its alternatives joined into a single regex."""

    label: str
    pattern: re.Pattern


def _alternation(patterns: tuple[str, ...]) -> str:
    return "(" + "|".join(patterns) + ")"


def compile_browser_table(table: PatternTable) -> tuple[CompiledEntry, ...]:
    """Compile browser/bot entries as ``(alternatives)[/ ]+(version)``."""
    return tuple(
        CompiledEntry(
            label,
            re.compile(_alternation(patterns) + _VERSION_SUFFIX, re.IGNORECASE),
        )
        for label, patterns in table
    )


def compile_table(table: PatternTable) -> tuple[CompiledEntry, ...]:
    """Compile engine/OS/device entries with the ``like `` lookbehind."""
    return tuple(
        CompiledEntry(
            label,
            re.compile(_NOT_LIKE + _alternation(patterns), re.IGNORECASE),
        )
        for label, patterns in table
    )


def _substitute(
    label: str, match: re.Match, upper: bool, suffix_groups: int = 0
) -> str:
    """Fill a placeholder label from the entry's own capture group.

    Group 1 is the whole alternation; group 2 (if the pattern has one) is
    the capture that replaces ``*``. ``suffix_groups`` counts the groups
    appended after the alternation, such as the browser version.
    """
    if PLACEHOLDER not in label or match.re.groups < 2 + suffix_groups:
        return label
    captured = match.group(2)
    if captured is None:
        return label
    captured = captured.upper() if upper else captured.lower()
    return label.replace(PLACEHOLDER, captured)


class Classifier:
    """Classifies User-Agent strings against a knowledge base.

    All patterns are compiled once at construction; afterwards the instance
    holds no mutable state and may be shared across threads.
    """

    def __init__(
        self,
        definition: KnowledgeBase | None = None,
        config: ClassifierConfig | None = None,
        filters: tuple[Filter, ...] = FILTER_CHAIN,
    ):
        if definition is None:
            definition = DEFAULT_DEFINITION
        if config is None:
            config = ClassifierConfig()

        self._definition = definition
        self._config = config
        self._filters = filters

        # Browsers first, then bots: declared category precedence
        self._browsers = compile_browser_table(
            definition.browsers() + definition.bots()
        )
        self._engines = compile_table(definition.engines())
        self._operating_systems = compile_table(definition.operating_systems())
        self._devices = compile_table(definition.devices())

    @property
    def definition(self) -> KnowledgeBase:
        """The knowledge base this classifier was built from."""
        return self._definition

    @property
    def config(self) -> ClassifierConfig:
        return self._config

    def classify(
        self, raw_string: str | None, strict: bool | None = None
    ) -> ParseResult:
        """Classify one User-Agent string.

        Never fails for string input: unknown or empty strings produce a
        result with null fields and device "Other".

        Args:
            raw_string: The User-Agent header value. None is treated as "".
            strict: Run the filter chain. Defaults to ``config.strict``.

        Returns:
            ParseResult for the trimmed string.

        Raises:
            InvalidUserAgentString: If ``raw_string`` is not a str or None.
        """
        if raw_string is None:
            raw_string = ""
        elif not isinstance(raw_string, str):
            raise InvalidUserAgentString.for_value(raw_string)

        if strict is None:
            strict = self._config.strict

        result = self.extract(raw_string)
        if strict:
            result = apply_filters(result, self._filters)

        if self._config.log_matches:
            logger.debug(
                "Classified '%s' (strict=%s): %s",
                result.raw_string,
                strict,
                result.to_dict(),
            )
        return result

    def extract(self, raw_string: str) -> ParseResult:
        """Structural extraction only (first pass, no filters)."""
        string = raw_string.strip()
        if not string:
            return ParseResult(raw_string=string)

        browser_name = None
        browser_version = None
        for entry in self._browsers:
            match = entry.pattern.search(string)
            if match:
                browser_name = _substitute(
                    entry.label, match, upper=False, suffix_groups=1
                )
                browser_version = match.group(match.re.groups)
                break

        return ParseResult(
            raw_string=string,
            browser_name=browser_name,
            browser_version=browser_version,
            browser_engine=self._match(self._engines, string),
            operating_system=self._match(self._operating_systems, string),
            device=self._match(self._devices, string, upper=True)
            or DEFAULT_DEVICE,
        )

    @staticmethod
    def _match(
        entries: tuple[CompiledEntry, ...], string: str, upper: bool = False
    ) -> str | None:
        """Return the label of the first entry matching ``string``."""
        for entry in entries:
            match = entry.pattern.search(string)
            if match:
                return _substitute(entry.label, match, upper=upper)
        return None


_default_classifier: Classifier | None = None


def get_default_classifier() -> Classifier:
    """Shared classifier over the built-in knowledge base."""
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = Classifier()
    return _default_classifier


def classify(raw_string: str | None, strict: bool = True) -> ParseResult:
    """Classify ``raw_string`` with the default knowledge base."""
    return get_default_classifier().classify(raw_string, strict=strict)
