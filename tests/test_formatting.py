import pytest

from cookbook.formatting import Internals, TooFewArgsError, format_positional


def test_greeting_example():
    text = Internals().to_string(
        "Hello, dear %2%! Did you read the book for %1% %% %3%\n"
    )
    assert text == "Hello, dear Reader! Did you read the book for 100 % !\n"


def test_repeated_placeholder():
    text = Internals().to_string("%1% == %1% && %1%%% != %1%\n\n")
    assert text == "100 == 100 && 100% != 100\n\n"


def test_single_placeholder_outputs_name():
    assert Internals().to_string("%2%\n\n") == "Reader\n\n"


def test_too_few_arguments():
    with pytest.raises(TooFewArgsError):
        Internals().to_string("%1% %2% %3% %4% %5%\n")


def test_extra_arguments_are_allowed():
    assert format_positional("%1%", "a", "b") == "a"


def test_no_placeholders_round_trip():
    assert format_positional("plain text") == "plain text"


def test_custom_values():
    internals = Internals(i=7, s="Bob", c="?")
    assert internals.to_string("%3%%2%%1%") == "?Bob7"


@pytest.mark.parametrize("fmt", ["50%", "%0%", "%x%"])
def test_bad_format_strings(fmt):
    with pytest.raises(ValueError):
        format_positional(fmt, 1)


def test_too_few_is_a_value_error():
    with pytest.raises(ValueError):
        format_positional("%2%", "only")