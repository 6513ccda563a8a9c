import pytest

from wdtools.registry import fetch, init


def _bump(slot):
    if slot is None:
        return 0
    slot.value += 1
    return slot.value


def test_vars():
    init(1)
    assert fetch(int, _bump) == 2
    assert fetch(int, _bump) == 3


class _Unregistered:
    pass


def test_missing_type_gets_none():
    assert fetch(_Unregistered, lambda slot: slot is None) is True


class _Config:
    def __init__(self, name):
        self.name = name


def test_init_replaces_previous_value():
    init(_Config("first"))
    init(_Config("second"))
    assert fetch(_Config, lambda slot: slot.value.name) == "second"


class _Base:
    pass


class _Derived(_Base):
    pass


def test_exact_type_is_the_key():
    init(_Derived())
    assert fetch(_Base, lambda slot: slot) is None
    assert fetch(_Derived, lambda slot: type(slot.value)) is _Derived


class _Counter:
    def __init__(self):
        self.hits = 0


def test_mutation_in_place_persists():
    init(_Counter())

    def hit(slot):
        slot.value.hits += 1
        return slot.value.hits

    assert [fetch(_Counter, hit) for _ in range(3)] == [1, 2, 3]


class _Boom:
    pass


def test_value_written_back_even_on_error():
    init(_Boom())

    def replace_then_fail(slot):
        slot.value = "replaced"
        raise RuntimeError("fail")

    with pytest.raises(RuntimeError):
        fetch(_Boom, replace_then_fail)
    assert fetch(_Boom, lambda slot: slot.value) == "replaced"


def test_kind_must_be_a_type():
    with pytest.raises(TypeError):
        fetch("int", _bump)