from collections import namedtuple

from cookbook.stringize import Cat, get_arithmetics, get_nonarithmetics, stringize


def test_cat_tuple():
    assert stringize((Cat(), 6, "_6")) == "Meow! 6_6"


def test_pair_and_array_of_cats():
    assert stringize((Cat(), Cat())) == str(Cat()) * 2
    assert stringize([Cat()] * 10) == str(Cat()) * 10


def test_named_tuple_and_strings():
    Pair = namedtuple("Pair", "first second")
    assert stringize(Pair("_0", "_1")) == "_0_1"
    assert stringize([]) == ""


def test_bool_and_float_forms():
    assert stringize((True, False)) == "10"
    assert stringize((0.0,)) == "0"


def test_split_arithmetics():
    blank = object()
    sequence = (8, blank, blank, 0.0)
    assert get_arithmetics(sequence) == (8, 0.0)
    assert get_arithmetics(sequence)[0] == 8
    assert get_nonarithmetics(sequence) == (blank, blank)


def test_split_is_a_partition():
    sequence = (1, "a", 2.5, Cat(), None, True)
    numbers_part = get_arithmetics(sequence)
    others = get_nonarithmetics(sequence)
    assert len(numbers_part) + len(others) == len(sequence)
    assert set(map(id, numbers_part)).isdisjoint(map(id, others))