"""
Arbor CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import asyncio
import json
from pathlib import Path
from typing import Any

from arbor.app import App
from arbor.builder import TreeBuilder
from arbor.command import CommandTree
from arbor.console import Console
from arbor.prompt_utils import ask_async
from arbor.registry import HandlerRegistry
from arbor.validators import regex_validator

output = Console()
handlers = HandlerRegistry()


def build_tree() -> CommandTree:
    builder = TreeBuilder()
    builder.define_option("key", "string", "The key to operate on", alias="k")
    builder.option((), "verbose", "boolean", "Turn on verbose output", alias="v")

    builder.command((), "hello", "Say hello!")
    builder.argument(
        "hello", "name", "string", "Name of person to greet", required=True
    )
    builder.option(
        "hello", "greeting", "string", "Set an alternate greeting", default="Hello"
    )

    builder.command((), "error", "Display an error")

    builder.command((), "action", "Show a long running task")
    builder.option("action", "spinner", "string", "The spinner to use", default="line")
    builder.command("action", "subaction", "Shouldn't be displayed", hidden=True)

    builder.command((), "hidden", "A hidden command")
    builder.option("hidden", "thing", "string", hidden=True)

    builder.command((), "keys", "Lists all stored key/value pairs")
    builder.option(
        "keys",
        "file",
        "string",
        "The path of the stored data",
        default=Path("keys.json"),
        transform=Path,
    )
    builder.command("keys", "set", "Sets a key/value pair", callback="keyset")
    builder.use_option("keys set", "key", required=True)
    builder.option("keys set", "value", "string", "The value to set", required=True)
    builder.command("keys", "get", "Gets the value for a key", callback="keyget")
    builder.use_option("keys get", "key", required=True)

    builder.command((), "ask", "Asks a question")
    return builder.build()


def load_keys(file: Path) -> dict[str, str]:
    output.debug(f"Loading {file}")
    with file.open("r", encoding="UTF-8") as handle:
        data = json.load(handle)
    output.debug(f"{file} loaded successfully!")
    return data


@handlers.register()
def hello(_argv: list[str], options: dict[str, Any]) -> None:
    output.notice(f"{options['greeting']} {options['name']}!")


@handlers.register()
def error(_argv: list[str], _options: dict[str, Any]) -> None:
    output.error("uh oh!")


@handlers.register()
async def action(_argv: list[str], options: dict[str, Any]) -> None:
    with output.spinner("Loading...", spinner=options["spinner"]):
        await asyncio.sleep(3)
    output.success("Done!")


@handlers.register()
def hidden(argv: list[str], options: dict[str, Any]) -> None:
    output.info(f"You found it! argv={argv} options={options}")


handlers.add("subaction", hidden)


@handlers.register()
async def ask(_argv: list[str], _options: dict[str, Any]) -> None:
    phone_number = await ask_async(
        "What is your phone number",
        validator=regex_validator(
            r"\d{3}-\d{3}-\d{4}",
            "Invalid phone number, must be in XXX-XXX-XXXX form!",
        ),
    )
    output.success(f"Got {phone_number}")


@handlers.register()
def keys(_argv: list[str], options: dict[str, Any]) -> None:
    file = options["file"]
    try:
        data = load_keys(file)
    except FileNotFoundError as error:
        output.warn(f"File {file} doesn't exist: {error.strerror}")
        return
    output.table(file.name, ["Key", "Value"], sorted(data.items()))


@handlers.register()
def keyset(_argv: list[str], options: dict[str, Any]) -> None:
    file, key, value = options["file"], options["key"], options["value"]
    try:
        data = load_keys(file)
    except FileNotFoundError:
        data = {}
    except (OSError, json.JSONDecodeError) as error:
        output.error(f"Unable to load {file}: {error}")
    data[key] = value
    with file.open("w", encoding="UTF-8") as handle:
        json.dump(data, handle, indent=2)
    output.success(f"{key} was set to {value}")


@handlers.register()
def keyget(_argv: list[str], options: dict[str, Any]) -> None:
    file, key = options["file"], options["key"]
    try:
        data = load_keys(file)
    except (OSError, json.JSONDecodeError) as error:
        output.error(f"Unable to load {file}: {error}")
    if key not in data:
        output.warn(f"No entry for {key}!")
    else:
        output.success(repr(data[key]))


def build_app() -> App:
    return App(
        build_tree(),
        handlers,
        program="arbor",
        console=output,
        description="A demo of the Arbor CLI toolkit",
    )


def main() -> None:
    build_app().main()


if __name__ == "__main__":
    main()
