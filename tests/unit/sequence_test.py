from pytest import raises

from sequenced import EmptyContainerError, OrderedSequence


def test_add_first_becomes_first():
    seq = OrderedSequence([1, 2])
    seq.add_first(0)
    assert seq.first() == 0
    assert len(seq) == 3


def test_add_is_add_last_and_keeps_duplicates():
    seq = OrderedSequence()
    seq.add(1)
    seq.add_last(1)
    seq.add_first(1)
    assert list(seq) == [1, 1, 1]
    assert len(seq) == 3


def test_remove_from_both_ends_returns_element():
    seq = OrderedSequence([0, 1, 2, 3])
    assert seq.remove_first() == 0
    assert seq.remove_last() == 3
    assert list(seq) == [1, 2]
    assert (seq.first(), seq.last()) == (1, 2)


def test_empty_sequence_raises_before_any_change():
    seq = OrderedSequence()
    for op in (seq.first, seq.last, seq.remove_first, seq.remove_last):
        with raises(EmptyContainerError):
            op()
    assert len(seq) == 0


def test_empty_container_error_is_an_index_error():
    with raises(IndexError):
        OrderedSequence().remove_last()


def test_remove_and_discard():
    seq = OrderedSequence([1, 2, 1])
    seq.remove(1)
    assert list(seq) == [2, 1]
    with raises(ValueError):
        seq.remove(5)
    seq.discard(5)
    seq.discard(2)
    assert list(seq) == [1]


def test_membership_iteration_and_clear():
    seq = OrderedSequence("abc")
    assert "b" in seq
    assert "z" not in seq
    assert list(reversed(seq)) == ["c", "b", "a"]
    seq.clear()
    assert not seq
    assert list(seq) == []


def test_order_sensitive_equality():
    assert OrderedSequence([1, 2]) == OrderedSequence([1, 2])
    assert OrderedSequence([1, 2]) != OrderedSequence([2, 1])
    assert OrderedSequence([1, 2]) != [1, 2]


def test_structural_change_during_iteration_fails_fast():
    seq = OrderedSequence([1, 2, 3])
    with raises(RuntimeError):
        for item in seq:
            seq.add_last(item)


def test_repr():
    assert repr(OrderedSequence([1, 2])) == "OrderedSequence([1, 2])"
