import pytest

from arbor.exceptions import BuildError
from arbor.parser import Option, OptionType, format_switch


def test_option_new_defaults():
    option = Option.new("greeting")
    assert option.type is OptionType.STRING
    assert option.help is None
    assert option.required is False
    assert option.default is None
    assert option.alias is None
    assert option.transform is None
    assert option.hidden is False
    assert option.accumulate is False


@pytest.mark.parametrize(
    "spelling, expected",
    [
        ("str", OptionType.STRING),
        ("int", OptionType.INTEGER),
        ("bool", OptionType.BOOLEAN),
        ("keep", OptionType.REPEATED),
        ("append", OptionType.REPEATED),
        ("Float", OptionType.FLOAT),
        (OptionType.COUNT, OptionType.COUNT),
    ],
)
def test_option_type_aliases(spelling, expected):
    assert Option.new("thing", spelling).type is expected


def test_unknown_type_is_build_error():
    with pytest.raises(BuildError, match="Invalid type for option 'thing'"):
        Option.new("thing", "atom")


def test_unknown_flag_suggests_closest():
    with pytest.raises(BuildError, match="did you mean 'required'"):
        Option.new("thing", required_=True)


@pytest.mark.parametrize("flag", ["required", "hidden", "accumulate"])
def test_boolean_flags_must_be_bool(flag):
    with pytest.raises(BuildError, match=f"Invalid value for '{flag}'"):
        Option.new("thing", **{flag: "yes"})


@pytest.mark.parametrize("alias", ["kk", "1", "-", "é", 5])
def test_malformed_alias(alias):
    with pytest.raises(BuildError, match="Invalid alias"):
        Option.new("key", alias=alias)


@pytest.mark.parametrize("name", ["", "9lives", "dry-run", "has space", None])
def test_invalid_names(name):
    with pytest.raises(BuildError):
        Option.new(name)


def test_switch_and_short_forms():
    option = Option.new("dry_run", "boolean", alias="n")
    assert option.switch == "--dry-run"
    assert option.short == "-n"
    assert format_switch("file_path") == "--file-path"


def test_flags_are_read_only():
    option = Option.new("key", required=True)
    with pytest.raises(TypeError):
        option.flags["required"] = False


def test_with_overrides_merges_flags_and_keeps_original():
    base = Option.new("key", "string", "The key", alias="k")
    imported = base.with_overrides(required=True)
    assert imported.required is True
    assert imported.alias == "k"
    assert imported.help == "The key"
    assert base.required is False
    assert imported is not base


def test_with_overrides_replaces_help_independently():
    base = Option.new("key", "string", "The key", required=True)
    imported = base.with_overrides(help="Key to fetch")
    assert imported.help == "Key to fetch"
    assert imported.required is True
    assert base.help == "The key"


def test_with_overrides_rejects_type_change():
    base = Option.new("key", "string")
    with pytest.raises(BuildError, match="Cannot override the type"):
        base.with_overrides(type="integer")


def test_transform_from_dotted_path():
    option = Option.new("name", transform="os.path.basename")
    assert option.apply_transform("/tmp/file.txt") == "file.txt"


def test_transform_from_colon_path():
    option = Option.new("name", transform="os.path:basename")
    assert option.apply_transform("/a/b") == "b"


def test_transform_tuple_passes_extra_arguments():
    def pad(value, width, fill):
        return value.rjust(width, fill)

    option = Option.new("code", transform=(pad, 4, "0"))
    assert option.apply_transform("7") == "0007"


def test_transform_tuple_with_dotted_path():
    option = Option.new("number", transform=("builtins.int", 16))
    assert option.apply_transform("ff") == 255


def test_transform_unresolvable():
    with pytest.raises(BuildError):
        Option.new("thing", transform="not_a_real_module_xyz.func")
    with pytest.raises(BuildError):
        Option.new("thing", transform=42)


def test_transform_applies_elementwise_to_collected_values():
    option = Option.new("tag", "repeated", transform=str.upper)
    assert option.apply_transform(["a", "b"]) == ["A", "B"]


def test_collects():
    assert Option.new("tag", "repeated").collects
    assert Option.new("tag", "string", accumulate=True).collects
    assert not Option.new("tag", "string").collects
