import pytest

from arbor import BuildError, TreeBuilder
from arbor.parser import OptionType


def test_builder_chains_and_builds_tree():
    tree = (
        TreeBuilder()
        .option((), "verbose", "boolean", "Verbose output", alias="v")
        .command((), "keys", "Key store")
        .command("keys", "set", "Set a key", callback="keyset")
        .option(["keys", "set"], "value", "string", required=True)
        .build()
    )
    assert list(tree.commands) == ["keys"]
    assert tree.global_options["verbose"].alias == "v"
    keyset = tree.lookup(["keys", "set"])
    assert keyset.dispatch_target == "keyset"
    assert keyset.options["value"].required is True
    assert tree.lookup("keys".split()).dispatch_target == "keys"


def test_tree_is_read_only():
    tree = TreeBuilder().command((), "hello").build()
    with pytest.raises(TypeError):
        tree.commands["other"] = tree.commands["hello"]
    with pytest.raises(AttributeError):
        tree.commands["hello"].name = "bye"


def test_arguments_keep_declaration_order():
    tree = (
        TreeBuilder()
        .command((), "copy")
        .argument("copy", "source")
        .argument("copy", "target")
        .build()
    )
    assert [arg.name for arg in tree.lookup(["copy"]).arguments] == ["source", "target"]


def test_duplicate_option_in_scope():
    builder = TreeBuilder().command((), "hello").option("hello", "greeting")
    with pytest.raises(BuildError, match="Duplicate of 'greeting'"):
        builder.option("hello", "greeting")


def test_option_name_clashing_with_argument():
    builder = TreeBuilder().command((), "hello").argument("hello", "name")
    with pytest.raises(BuildError, match="Duplicate of 'name'"):
        builder.option("hello", "name")


def test_same_option_name_in_different_scopes_is_allowed():
    tree = (
        TreeBuilder()
        .option((), "verbose", "boolean")
        .command((), "hello")
        .option("hello", "verbose", "count")
        .build()
    )
    assert tree.lookup(["hello"]).options["verbose"].type is OptionType.COUNT


def test_duplicate_alias_in_scope():
    builder = TreeBuilder().option((), "verbose", "boolean", alias="v")
    with pytest.raises(BuildError, match="Alias '-v'"):
        builder.option((), "version", "boolean", alias="v")


def test_duplicate_sibling_command():
    builder = TreeBuilder().command((), "hello")
    with pytest.raises(BuildError, match="already defined"):
        builder.command((), "hello")


def test_unknown_parent_path():
    builder = TreeBuilder().command((), "keys")
    with pytest.raises(BuildError, match="No such command 'keys nope'"):
        builder.command("keys nope", "set")
    with pytest.raises(BuildError, match="No such command 'ghost'"):
        builder.option("ghost", "thing")


def test_argument_requires_a_command():
    with pytest.raises(BuildError, match="outside of a command"):
        TreeBuilder().argument((), "name")


def test_argument_cannot_be_a_flag():
    builder = TreeBuilder().command((), "hello")
    with pytest.raises(BuildError, match="always take a value"):
        builder.argument("hello", "loud", "boolean")


@pytest.mark.parametrize("name", ["", "two words", "-dash", 3])
def test_invalid_command_names(name):
    with pytest.raises(BuildError):
        TreeBuilder().command((), name)


def test_hidden_must_be_bool():
    with pytest.raises(BuildError, match="hidden"):
        TreeBuilder().command((), "secret", hidden="yes")


def test_abstract_option_import_with_overrides():
    tree = (
        TreeBuilder()
        .define_option("key", "string", "The key", alias="k")
        .command((), "keys")
        .command("keys", "set")
        .command("keys", "get")
        .use_option("keys set", "key", required=True)
        .use_option("keys get", "key", help="Key to fetch")
        .build()
    )
    set_key = tree.lookup(["keys", "set"]).options["key"]
    get_key = tree.lookup(["keys", "get"]).options["key"]
    assert set_key.required is True
    assert set_key.help == "The key"
    assert get_key.required is False
    assert get_key.help == "Key to fetch"
    assert set_key.alias == get_key.alias == "k"
    assert set_key is not get_key


def test_abstract_option_is_not_in_any_scope():
    tree = TreeBuilder().define_option("key").command((), "keys").build()
    assert "key" not in tree.global_options
    assert "key" not in tree.lookup(["keys"]).options


def test_duplicate_abstract_option():
    builder = TreeBuilder().define_option("key")
    with pytest.raises(BuildError, match="Duplicate of 'key'"):
        builder.define_option("key")


def test_import_of_undefined_option():
    builder = TreeBuilder().command((), "keys")
    with pytest.raises(BuildError, match="No such option 'key'"):
        builder.use_option("keys", "key")


def test_import_cannot_change_type():
    builder = TreeBuilder().define_option("key").command((), "keys")
    with pytest.raises(BuildError, match="Cannot override the type"):
        builder.use_option("keys", "key", type="integer")


def test_walk_visits_every_command_depth_first():
    tree = (
        TreeBuilder()
        .command((), "a")
        .command("a", "b")
        .command("a b", "c")
        .command((), "d")
        .build()
    )
    assert [path for path, _ in tree.walk()] == [
        ("a",),
        ("a", "b"),
        ("a", "b", "c"),
        ("d",),
    ]
