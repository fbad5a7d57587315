from pytest import raises

from sequenced import EmptyContainerError, OrderedSet


def test_construction_keeps_first_occurrence():
    s = OrderedSet([3, 1, 3, 2, 1])
    assert list(s) == [3, 1, 2]
    assert len(s) == 3


def test_adding_present_element_is_noop_at_either_end():
    s = OrderedSet([1, 2, 3])
    s.add(2)
    s.add_first(3)
    s.add_last(1)
    assert list(s) == [1, 2, 3]
    assert len(s) == 3
    assert 2 in s


def test_new_elements_go_to_named_end():
    s = OrderedSet([1, 2])
    s.add_first(0)
    s.add_last(3)
    assert list(s) == [0, 1, 2, 3]
    assert (s.first(), s.last()) == (0, 3)


def test_removal_updates_membership():
    s = OrderedSet([1, 2, 3])
    assert s.remove_first() == 1
    assert s.remove_last() == 3
    assert 1 not in s and 3 not in s
    s.add_last(1)
    assert list(s) == [2, 1]


def test_empty_set_raises():
    s = OrderedSet()
    for op in (s.first, s.last, s.remove_first, s.remove_last):
        with raises(EmptyContainerError):
            op()


def test_discard_remove_and_pop():
    s = OrderedSet("abcd")
    s.discard("b")
    s.discard("z")
    with raises(KeyError):
        s.remove("z")
    s.remove("c")
    assert list(s) == ["a", "d"]
    assert s.pop() == "a"
    s.clear()
    with raises(KeyError):
        s.pop()


def test_set_semantics():
    assert OrderedSet([1, 2, 3]) == OrderedSet([3, 2, 1])
    assert OrderedSet([1, 2]) == {1, 2}
    assert OrderedSet([1, 2]) <= {1, 2, 3}
    union = OrderedSet([3, 1]) | OrderedSet([2, 1])
    assert isinstance(union, OrderedSet)
    assert list(union) == [3, 1, 2]
    assert list(OrderedSet([1, 2, 3]) & [3, 1]) == [3, 1]


def test_in_place_union_appends_in_order():
    s = OrderedSet([1])
    s |= [3, 1, 2]
    assert list(s) == [1, 3, 2]


def test_empty_set_errors_name_the_set():
    s = OrderedSet()
    for name in ("first", "last", "remove_first", "remove_last"):
        with raises(EmptyContainerError, match=f"{name}\\(\\) on empty OrderedSet"):
            getattr(s, name)()


def test_pop_removes_first_element():
    s = OrderedSet([3, 1, 2])
    assert s.pop() == 3
    assert list(s) == [1, 2]
