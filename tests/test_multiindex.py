import pytest

from cookbook.multiindex import Person, PersonIndex


@pytest.fixture
def persons():
    index = PersonIndex()
    index.insert(Person(1, "John Snow", 185, 80))
    index.insert(Person(2, "Vasya Pupkin", 165, 60))
    index.insert(Person(3, "Antony Polukhin", 183, 70))
    index.insert(Person(3, "Anton Polukhin", 182, 70))
    return index


def test_find_by_name_and_id(persons):
    assert persons.find_name("John Snow").id == 1
    assert persons.find_id(2).name == "Vasya Pupkin"
    assert persons.find_name("Anton Polukhin").id == 3


def test_contains_compares_names(persons):
    assert Person(77, "Anton Polukhin", 0, 0) in persons
    assert "Nobody" not in persons


def test_orderings(persons):
    names = [p.name for p in persons.by_name()]
    assert names == sorted(names)
    heights = [p.height for p in persons.by_height()]
    assert heights == sorted(heights)
    weights = [p.weight for p in persons.by_weight()]
    assert weights == sorted(weights)


def test_equal_weights_keep_insertion_order(persons):
    same = [p.name for p in persons.by_weight() if p.weight == 70]
    assert same == ["Antony Polukhin", "Anton Polukhin"]


def test_by_id_groups_shared_ids(persons):
    ids = [p.id for p in persons.by_id()]
    assert sorted(ids) == [1, 2, 3, 3]
    first = ids.index(3)
    assert ids[first + 1] == 3


def test_duplicate_name_rejected(persons):
    assert persons.insert(Person(9, "John Snow", 1, 1)) is False
    assert len(persons) == 4
    assert persons.find_name("John Snow").id == 1


def test_missing_lookups_raise(persons):
    with pytest.raises(KeyError):
        persons.find_name("Nobody")
    with pytest.raises(KeyError):
        persons.find_id(42)