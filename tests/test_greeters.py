import pytest

from cookbook.greeters import greet_do_not, greet_hello, load_greeter, main


def test_hello():
    assert greet_hello("Sally Sparrow") == "Good to meet you, Sally Sparrow."


def test_do_not_ends_with_name():
    text = greet_do_not("Sally Sparrow")
    assert text.startswith("They are fast.")
    assert text.endswith("Good luck, Sally Sparrow.")


@pytest.mark.parametrize(
    "plugin, greeter",
    [
        ("plugin_hello", greet_hello),
        ("build/libplugin_hello.so", greet_hello),
        ("plugin_do_not.dll", greet_do_not),
    ],
)
def test_load_greeter(plugin, greeter):
    assert load_greeter(plugin) is greeter


def test_unknown_plugin():
    with pytest.raises(LookupError):
        load_greeter("plugin_missing")


def test_main_prints_greeting(capsys):
    assert main(["plugin_hello"]) == 0
    assert capsys.readouterr().out == greet_hello("Sally Sparrow")


def test_main_unknown_plugin():
    assert main(["nothing"]) == 1