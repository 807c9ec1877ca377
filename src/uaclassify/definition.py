"""Knowledge base of User-Agent patterns.

Provides:
- PatternTable: ordered ``(label, patterns)`` pairs, first match wins
- KnowledgeBase: protocol a custom table set must satisfy
- UserAgentDefinition / DEFAULT_DEFINITION: the built-in tables
- KNOWN_REAL_BROWSERS, KNOWN_BOTS: label sets used by the UserAgent wrapper

Patterns are case-insensitive regex fragments. A label containing ``*`` is a
placeholder label: its pattern carries one capturing group and the captured
text replaces the ``*`` at match time (lower-cased for browsers and bots,
upper-cased for devices).

Order is significant everywhere. Specific entries must precede generic ones
that could also match the same string, e.g. ``opr`` before ``opera``,
``chrome`` before ``safari`` (Chrome UAs also carry ``Safari/``), pinned
Windows NT builds before the ``windows xp`` alias, and ``Linux`` last since
Android and Ubuntu UAs contain it too.
"""

from dataclasses import dataclass
from typing import Protocol

PatternTable = tuple[tuple[str, tuple[str, ...]], ...]

PLACEHOLDER = "*"

BROWSERS: PatternTable = (
    ("firefox", (
        "firefox", "minefield", "iceweasel", "shiretoko", "namoroka",
        "shredder", "granparadiso",
    )),
    ("opera", ("opr", "opera")),
    ("edge", ("edge",)),
    ("yabrowser", ("yabrowser",)),
    ("maxthon", ("maxthon",)),
    ("msie", ("msie",)),
    ("chrome", ("chrome",)),
    ("safari", ("safari",)),
    ("konqueror", ("konqueror",)),
    ("netscape", ("netscape",)),
    ("lynx", ("lynx",)),
)

BOTS: PatternTable = (
    ("googlebot", ("googlebot",)),
    ("bingbot", ("bingbot",)),
    ("msnbot", ("msnbot",)),
    ("yahoobot", ("yahoobot",)),
    ("yandexbot", (r"yandex\w+",)),
    ("baidubot", (r"baiduspider\w*",)),
    ("facebookbot", ("facebookexternalhit",)),
    ("flamecore *", (r"flamecore (\w+)",)),
)

ENGINES: PatternTable = (
    ("webkit", ("webkit",)),
    ("gecko", ("gecko",)),
    ("trident", ("trident",)),
    ("presto", ("presto",)),
    ("khtml", ("khtml",)),
)

OPERATING_SYSTEMS: PatternTable = (
    ("Windows 10", (r"windows nt 10\.0",)),
    ("Windows 8.1", (r"windows nt 6\.3",)),
    ("Windows 8", (r"windows nt 6\.2",)),
    ("Windows 7", (r"windows nt 6\.1",)),
    ("Windows Vista", (r"windows nt 6\.0",)),
    ("Windows Server 2003/XP x64", (r"windows nt 5\.2",)),
    ("Windows XP", (r"windows nt 5\.1", "windows xp")),
    ("Windows 2000", (r"windows nt 5\.0",)),
    ("Mac OS X", ("mac os x",)),
    ("Mac OS 9", ("mac_powerpc",)),
    ("Macintosh", ("macintosh",)),
    ("Ubuntu", ("ubuntu",)),
    ("iOS", ("iphone", "ipad", "ipod")),
    ("Android", ("android",)),
    ("BlackBerry", ("blackberry",)),
    ("Mobile", ("mobile", "webos")),
    ("Linux", ("linux",)),
)

DEVICES: PatternTable = (
    ("Apple iPhone", ("iphone",)),
    ("Apple iPad", ("ipad",)),
    ("Apple iPod", ("ipod",)),
    ("Google Nexus *", (r"nexus (\w+)",)),
    ("BlackBerry", ("blackberry",)),
    ("Amazon Kindle Fire", ("kindle fire",)),
    ("Amazon Kindle", ("kindle",)),
    ("Mobile", ("mobile", "android")),
)

# Label the bot filter assigns to Yahoo's crawler, whose UA has no version
YAHOO_BOT_LABEL = "yahoo bot"

KNOWN_REAL_BROWSERS: frozenset[str] = frozenset(label for label, _ in BROWSERS)

KNOWN_BOTS: frozenset[str] = frozenset(
    [label for label, _ in BOTS if PLACEHOLDER not in label] + [YAHOO_BOT_LABEL]
)


class KnowledgeBase(Protocol):
    """Read-only set of the five ordered pattern tables."""

    def browsers(self) -> PatternTable: ...

    def bots(self) -> PatternTable: ...

    def engines(self) -> PatternTable: ...

    def operating_systems(self) -> PatternTable: ...

    def devices(self) -> PatternTable: ...


@dataclass(frozen=True)
class UserAgentDefinition:
    """Default knowledge base.

    Pass replacement tables to customize, e.g.
    ``UserAgentDefinition(bot_table=BOTS + (("mybot", ("mybot",)),))``.
    Tables are replaced wholesale; there is no per-entry edit API.
    """

    browser_table: PatternTable = BROWSERS
    bot_table: PatternTable = BOTS
    engine_table: PatternTable = ENGINES
    operating_system_table: PatternTable = OPERATING_SYSTEMS
    device_table: PatternTable = DEVICES

    def __post_init__(self):
        for name in (
            "browser_table",
            "bot_table",
            "engine_table",
            "operating_system_table",
            "device_table",
        ):
            check_table(getattr(self, name), name)

    def browsers(self) -> PatternTable:
        return self.browser_table

    def bots(self) -> PatternTable:
        return self.bot_table

    def engines(self) -> PatternTable:
        return self.engine_table

    def operating_systems(self) -> PatternTable:
        return self.operating_system_table

    def devices(self) -> PatternTable:
        return self.device_table


def check_table(table: PatternTable, name: str = "table") -> None:
    """Validate the shape of a pattern table.

    Raises:
        ValueError: If a label repeats, an entry has no patterns, or a label
            holds more than one placeholder.
    """
    seen: set[str] = set()
    for label, patterns in table:
        if label in seen:
            raise ValueError(f"{name}: duplicate label '{label}'")
        seen.add(label)
        if not patterns:
            raise ValueError(f"{name}: label '{label}' has no patterns")
        if label.count(PLACEHOLDER) > 1:
            raise ValueError(
                f"{name}: label '{label}' has more than one placeholder"
            )


DEFAULT_DEFINITION = UserAgentDefinition()
