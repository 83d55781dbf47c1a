import pytest

from imkit import core
from imkit.core import ClassDefinitionError, ImObject


class Counter(ImObject):
    def __init__(self, value):
        self.value = value

    def tostr(self):
        return f"Counter({self.value})"

    def compare(self, other):
        return self.value - other.value

    def clone(self):
        return Counter(self.value)

    def assign(self, other):
        self.value = other.value


class SubCounter(Counter):
    pass


class Plain(ImObject):
    pass


def test_default_tostr_is_address():
    obj = Plain()
    assert core.tostr(obj) == f"0x{id(obj):x}"


def test_tostr_inherited_by_subclass():
    assert core.tostr(SubCounter(5)) == "Counter(5)"


def test_tostr_uses_override():
    assert core.tostr(Counter(3)) == "Counter(3)"


def test_compare_same_object_is_zero():
    obj = Plain()
    assert core.compare(obj, obj) == 0


def test_compare_different_classes():
    assert core.compare(Counter(1), Plain()) == core.DIFFERENT_CLASSES
    assert core.compare(Counter(1), SubCounter(1)) == core.DIFFERENT_CLASSES


def test_compare_uses_class_compare():
    assert core.compare(Counter(2), Counter(2)) == 0
    assert core.compare(Counter(1), Counter(4)) < 0
    assert core.compare(Counter(4), Counter(1)) > 0


def test_default_compare_is_antisymmetric():
    a, b = Plain(), Plain()
    assert core.compare(a, b) == -core.compare(b, a)
    assert core.compare(a, b) != 0


def test_clone_without_support_raises():
    with pytest.raises(ClassDefinitionError):
        core.clone(Plain())


def test_clone_is_independent():
    original = Counter(7)
    copy = core.clone(original)
    assert copy is not original
    assert core.compare(copy, original) == 0
    copy.value = 9
    assert original.value == 7


def test_assign_copies_value_and_returns_source():
    target, source = Counter(1), Counter(10)
    result = core.assign(target, source)
    assert result is source
    assert target.value == 10


def test_assign_without_support_raises():
    with pytest.raises(ClassDefinitionError):
        core.assign(Plain(), Plain())


def test_is_instance_follows_hierarchy():
    sub = SubCounter(1)
    assert core.is_instance(sub, SubCounter)
    assert core.is_instance(sub, Counter)
    assert core.is_instance(sub, ImObject)
    assert not core.is_instance(Counter(1), SubCounter)
    assert not core.is_instance(Plain(), Counter)


def test_non_object_rejected():
    with pytest.raises(TypeError):
        core.tostr(42)