import pytest

from arbor import TreeBuilder
from arbor.help import HelpRenderer, first_line, format_option_help
from arbor.parser import Option


@pytest.fixture
def tree():
    builder = TreeBuilder()
    builder.option((), "verbose", "boolean", "Turn on verbose output", alias="v")
    builder.option((), "secret", "string", hidden=True)
    builder.command((), "hello", "Say hello!")
    builder.argument("hello", "name", "string", "Name of person to greet")
    builder.option(
        "hello", "greeting", "string", "Set an alternate greeting", default="Hello"
    )
    builder.command((), "keys", "Lists all stored key/value pairs\nStored as JSON.")
    builder.option("keys", "limit", "integer", "How many to show", default=10)
    builder.command("keys", "set", "Sets a key/value pair", callback="keyset")
    builder.command("keys", "purge", "Removes everything", hidden=True)
    builder.command((), "hidden", "A hidden command", hidden=True)
    return builder.build()


@pytest.fixture
def renderer(tree, console):
    return HelpRenderer(tree, program="demo", console=console, description="A tool")


def test_top_level_help(renderer, capsys):
    renderer.render()
    out = capsys.readouterr().out
    assert "demo - A tool" in out
    assert "$ demo [global_options] <command> [options..] [args..]" in out
    assert "GLOBAL OPTIONS" in out
    assert "-v, --verbose" in out
    assert "--verbose=" not in out
    assert "--secret" not in out
    assert "COMMANDS" in out
    assert "Say hello!" in out
    assert "Lists all stored key/value pairs ..." in out
    assert "Stored as JSON." not in out
    assert "A hidden command" not in out


def test_command_help(renderer, capsys):
    renderer.render(["hello"])
    out = capsys.readouterr().out
    assert "Say hello!" in out
    assert "$ demo hello [options..] [args..]" in out
    assert '--greeting=string' in out
    assert 'Set an alternate greeting (default: "Hello")' in out
    assert "ARGUMENTS" in out
    assert "Name of person to greet" in out
    assert "SUBCOMMANDS" not in out


def test_command_help_lists_visible_subcommands(renderer, capsys):
    renderer.render(["keys"])
    out = capsys.readouterr().out
    assert "$ demo keys [options..]" in out
    assert "[args..]" not in out
    assert "SUBCOMMANDS" in out
    assert "Sets a key/value pair" in out
    assert "Removes everything" not in out
    assert "How many to show (default: 10)" in out


def test_unknown_path_falls_back_to_top_level(renderer, capsys):
    renderer.render(["nope"])
    assert "COMMANDS" in capsys.readouterr().out


def test_format_option_help():
    assert format_option_help(Option.new("count", "integer", alias="c")) == (
        "-c, --count=integer",
        "",
    )
    assert format_option_help(Option.new("dry_run", "boolean", "Do nothing")) == (
        "--dry-run",
        "Do nothing",
    )
    assert format_option_help(Option.new("mode", default="fast")) == (
        "--mode=string",
        '(default: "fast")',
    )


def test_first_line():
    assert first_line("one\ntwo") == "one ..."
    assert first_line("one") == "one"
    assert first_line(None) == ""
