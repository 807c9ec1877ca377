"""Tests for the knowledge base tables (uaclassify.definition)."""

import pytest

from uaclassify.definition import (
    BOTS,
    BROWSERS,
    DEFAULT_DEFINITION,
    DEVICES,
    ENGINES,
    KNOWN_BOTS,
    KNOWN_REAL_BROWSERS,
    OPERATING_SYSTEMS,
    UserAgentDefinition,
    check_table,
)


def _labels(table):
    return [label for label, _ in table]


class TestTableOrder:
    """Precedence-sensitive orderings."""

    def test_opr_before_opera(self):
        assert dict(BROWSERS)["opera"] == ("opr", "opera")

    def test_chrome_before_safari(self):
        labels = _labels(BROWSERS)
        assert labels.index("chrome") < labels.index("safari")

    def test_specific_browsers_before_chrome(self):
        labels = _labels(BROWSERS)
        for name in ("opera", "edge", "yabrowser", "maxthon"):
            assert labels.index(name) < labels.index("chrome")

    def test_maxthon_before_msie(self):
        labels = _labels(BROWSERS)
        assert labels.index("maxthon") < labels.index("msie")

    def test_linux_last_os(self):
        assert _labels(OPERATING_SYSTEMS)[-1] == "Linux"

    def test_ios_before_mobile(self):
        labels = _labels(OPERATING_SYSTEMS)
        assert labels.index("iOS") < labels.index("Mobile")

    def test_windows_versions_before_mac(self):
        labels = _labels(OPERATING_SYSTEMS)
        assert labels[:8] == [
            "Windows 10",
            "Windows 8.1",
            "Windows 8",
            "Windows 7",
            "Windows Vista",
            "Windows Server 2003/XP x64",
            "Windows XP",
            "Windows 2000",
        ]

    def test_mobile_last_device(self):
        assert _labels(DEVICES)[-1] == "Mobile"

    def test_webkit_first_engine(self):
        assert _labels(ENGINES) == ["webkit", "gecko", "trident", "presto", "khtml"]


class TestPlaceholders:
    """Placeholder labels carry a capture group."""

    @pytest.mark.parametrize("table", [BROWSERS, BOTS, ENGINES, OPERATING_SYSTEMS, DEVICES])
    def test_placeholder_patterns_capture(self, table):
        for label, patterns in table:
            if "*" in label:
                assert all("(" in p for p in patterns), label

    def test_known_placeholders(self):
        assert dict(BOTS)["flamecore *"] == (r"flamecore (\w+)",)
        assert dict(DEVICES)["Google Nexus *"] == (r"nexus (\w+)",)


class TestKnownLabels:
    def test_real_browsers_are_browser_labels(self):
        assert KNOWN_REAL_BROWSERS == set(_labels(BROWSERS))

    def test_bots_exclude_placeholders(self):
        assert "flamecore *" not in KNOWN_BOTS
        assert "googlebot" in KNOWN_BOTS

    def test_yahoo_filter_label_is_a_bot(self):
        assert "yahoo bot" in KNOWN_BOTS

    def test_no_overlap(self):
        assert not KNOWN_REAL_BROWSERS & KNOWN_BOTS


class TestUserAgentDefinition:
    """Accessors and wholesale table replacement."""

    def test_default_accessors(self):
        assert DEFAULT_DEFINITION.browsers() is BROWSERS
        assert DEFAULT_DEFINITION.bots() is BOTS
        assert DEFAULT_DEFINITION.engines() is ENGINES
        assert DEFAULT_DEFINITION.operating_systems() is OPERATING_SYSTEMS
        assert DEFAULT_DEFINITION.devices() is DEVICES

    def test_replace_one_table(self):
        engines = (("blink", ("blink",)),)
        definition = UserAgentDefinition(engine_table=engines)
        assert definition.engines() == engines
        assert definition.browsers() is BROWSERS

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_DEFINITION.browser_table = ()

    def test_duplicate_label_rejected(self):
        with pytest.raises(ValueError, match="duplicate label 'x'"):
            UserAgentDefinition(bot_table=(("x", ("a",)), ("x", ("b",))))

    def test_empty_patterns_rejected(self):
        with pytest.raises(ValueError, match="no patterns"):
            UserAgentDefinition(device_table=(("Phone", ()),))


class TestCheckTable:
    def test_builtin_tables_valid(self):
        for table in (BROWSERS, BOTS, ENGINES, OPERATING_SYSTEMS, DEVICES):
            check_table(table)

    def test_double_placeholder_rejected(self):
        with pytest.raises(ValueError, match="more than one placeholder"):
            check_table((("* and *", (r"(\w+) (\w+)",)),), "devices")

    def test_labels_may_repeat_across_tables(self):
        assert "BlackBerry" in _labels(OPERATING_SYSTEMS)
        assert "BlackBerry" in _labels(DEVICES)
