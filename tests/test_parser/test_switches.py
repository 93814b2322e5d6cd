import pytest

from arbor.exceptions import OptionValueError
from arbor.parser import Option, SwitchScanner
from arbor.parser.switches import is_switch


def scanner(*options: Option) -> SwitchScanner:
    return SwitchScanner({option.name: option for option in options})


def values(result):
    return [(option.name, value) for option, value in result.parsed]


@pytest.mark.parametrize(
    "token, expected",
    [
        ("--name", True),
        ("-v", True),
        ("-abc", True),
        ("--", False),
        ("-", False),
        ("-5", False),
        ("-2.5", False),
        ("name", False),
    ],
)
def test_is_switch(token, expected):
    assert is_switch(token) is expected


def test_long_switch_forms():
    scan = scanner(Option.new("greeting"), Option.new("count", "integer"))
    result = scan.scan_head(["--greeting", "Hi", "--count=3", "rest"])
    assert values(result) == [("greeting", "Hi"), ("count", 3)]
    assert result.remaining == ["rest"]
    assert result.invalid is None


def test_underscore_names_use_dashes():
    result = scanner(Option.new("dry_run", "boolean")).scan_head(["--dry-run"])
    assert values(result) == [("dry_run", True)]


def test_boolean_negation_and_inline_value():
    scan = scanner(Option.new("verbose", "boolean"))
    assert values(scan.scan_head(["--no-verbose"])) == [("verbose", False)]
    assert values(scan.scan_head(["--verbose=false"])) == [("verbose", False)]
    assert values(scan.scan_head(["--verbose"])) == [("verbose", True)]


def test_boolean_does_not_consume_next_token():
    result = scanner(Option.new("verbose", "boolean")).scan_head(["--verbose", "ping"])
    assert values(result) == [("verbose", True)]
    assert result.remaining == ["ping"]


def test_alias_with_value():
    result = scanner(Option.new("key", alias="k")).scan_head(["-k", "a", "b"])
    assert values(result) == [("key", "a")]
    assert result.remaining == ["b"]


def test_bundled_flags():
    scan = scanner(
        Option.new("verbose", "count", alias="v"),
        Option.new("force", "boolean", alias="f"),
    )
    result = scan.scan_head(["-vvf"])
    assert values(result) == [("verbose", 1), ("verbose", 1), ("force", True)]


def test_bundle_with_value_option_is_invalid():
    scan = scanner(
        Option.new("force", "boolean", alias="f"),
        Option.new("key", alias="k"),
    )
    result = scan.scan_head(["-fk", "x"])
    assert result.invalid == "-fk"
    assert result.parsed == []


def test_unknown_switch_stops_scan():
    result = scanner(Option.new("key")).scan_head(["--key", "a", "--other", "b"])
    assert values(result) == [("key", "a")]
    assert result.invalid == "--other"
    assert result.remaining == ["--other", "b"]


def test_double_dash_stops_scan_and_is_kept():
    result = scanner(Option.new("key")).scan_head(["--key", "a", "--", "--key", "b"])
    assert values(result) == [("key", "a")]
    assert result.remaining == ["--", "--key", "b"]


def test_negative_number_is_a_value():
    result = scanner(Option.new("offset", "integer")).scan_head(["--offset", "-5"])
    assert values(result) == [("offset", -5)]


def test_missing_value():
    with pytest.raises(OptionValueError, match="Missing value for option '--key'"):
        scanner(Option.new("key")).scan_head(["--key"])
    with pytest.raises(OptionValueError, match="Missing value"):
        scanner(Option.new("key")).scan_head(["--key", "--"])


def test_invalid_typed_value():
    with pytest.raises(OptionValueError) as info:
        scanner(Option.new("count", "integer")).scan_head(["--count", "many"])
    assert info.value.option == "count"
    assert info.value.value == "many"


def test_count_rejects_inline_value():
    with pytest.raises(OptionValueError, match="does not take a value"):
        scanner(Option.new("verbose", "count")).scan_head(["--verbose=2"])
