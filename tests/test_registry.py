import types

import pytest

from arbor import HandlerNotFoundError, HandlerRegistry


def test_register_decorator_uses_function_name():
    registry = HandlerRegistry()

    @registry.register()
    def hello(argv, options):
        return "hi"

    assert "hello" in registry
    assert registry.get("hello") is hello


def test_register_with_explicit_name():
    registry = HandlerRegistry()

    @registry.register("keyset")
    def set_key(argv, options):
        pass

    assert registry.get("keyset") is set_key
    assert "set_key" not in registry


def test_get_unknown_raises():
    with pytest.raises(HandlerNotFoundError, match="No handler registered for 'nope'"):
        HandlerRegistry().get("nope")


def test_add_rejects_non_callables():
    with pytest.raises(TypeError):
        HandlerRegistry().add("hello", "not callable")


def test_from_mapping():
    registry = HandlerRegistry({"ping": lambda argv, options: "pong"})
    assert registry.get("ping")([], {}) == "pong"
    assert len(registry) == 1
    assert list(registry) == ["ping"]


def test_from_object_matches_public_functions():
    module = types.SimpleNamespace(
        hello=lambda argv, options: "hello",
        init_global=lambda argv, options: "init",
        _private=lambda argv, options: "private",
        value=42,
    )
    registry = HandlerRegistry.from_object(
        module, ["hello", "init-global", "_private", "value", "missing"]
    )
    assert registry.get("hello")([], {}) == "hello"
    assert registry.get("init-global")([], {}) == "init"
    assert "_private" not in registry
    assert "value" not in registry
    assert "missing" not in registry
