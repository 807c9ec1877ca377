"""UserAgent value object wrapping a single classification.

Convenience layer over ``uaclassify.parser``: validates the input type,
delegates to a Classifier and exposes read accessors plus known-label
queries. Adds no matching behaviour of its own.
"""

from collections.abc import Mapping

from uaclassify.config import ClassifierConfig
from uaclassify.definition import KNOWN_BOTS, KNOWN_REAL_BROWSERS
from uaclassify.exceptions import InvalidUserAgentString
from uaclassify.models import ParseResult
from uaclassify.parser import Classifier, get_default_classifier


class UserAgent:
    """A classified User-Agent string.

    Raises:
        InvalidUserAgentString: On construction, if ``raw_string`` is not a
            str or None.
    """

    def __init__(
        self,
        raw_string: str | None = None,
        classifier: Classifier | None = None,
        strict: bool = True,
    ):
        if raw_string is not None and not isinstance(raw_string, str):
            raise InvalidUserAgentString.for_value(raw_string)
        if classifier is None:
            classifier = get_default_classifier()

        self._string = raw_string or ""
        self._result = classifier.classify(self._string, strict=strict)

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, object],
        classifier: Classifier | None = None,
        config: ClassifierConfig | None = None,
    ) -> "UserAgent":
        """Build from a WSGI/CGI environ mapping.

        A missing header classifies as the empty string.
        """
        if config is None:
            config = classifier.config if classifier else ClassifierConfig()
        return cls(
            environ.get(config.environ_key),
            classifier=classifier,
            strict=config.strict,
        )

    def __str__(self) -> str:
        return self.full_name

    def __repr__(self) -> str:
        return f"UserAgent({self._string!r})"

    @property
    def user_agent_string(self) -> str:
        """The string as given (untrimmed)."""
        return self._string

    @property
    def result(self) -> ParseResult:
        return self._result

    @property
    def browser_name(self) -> str | None:
        return self._result.browser_name

    @property
    def browser_version(self) -> str | None:
        return self._result.browser_version

    @property
    def full_name(self) -> str:
        """Browser name and version, e.g. ``"chrome 41.0"``.

        Missing parts render as empty strings.
        """
        return f"{self.browser_name or ''} {self.browser_version or ''}"

    @property
    def engine(self) -> str | None:
        return self._result.browser_engine

    @property
    def os(self) -> str | None:
        return self._result.operating_system

    @property
    def device(self) -> str:
        return self._result.device

    def is_unknown(self) -> bool:
        """True if no browser or bot was recognised."""
        return not self.browser_name

    def is_real_browser(self) -> bool:
        return self.browser_name in KNOWN_REAL_BROWSERS

    def is_bot(self) -> bool:
        return self.browser_name in KNOWN_BOTS

    def to_dict(self) -> dict[str, str | None]:
        """Plain mapping of the five classification fields."""
        return self._result.to_dict()
