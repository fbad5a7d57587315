from pytest import mark, raises

from sequenced import (
    OrderedMap,
    OrderedSequence,
    OrderedSet,
    ReadOnlyMap,
    ReadOnlySequence,
    ReadOnlySet,
    read_only,
    reversed_view,
)


@mark.parametrize(
    "container,expected",
    [
        (OrderedSequence([1]), ReadOnlySequence),
        (OrderedSet([1]), ReadOnlySet),
        (OrderedMap({1: "a"}), ReadOnlyMap),
        (OrderedSet([1]).reversed(), ReadOnlySet),
        (OrderedMap({1: "a"}).reversed(), ReadOnlyMap),
    ],
    ids=["sequence", "set", "map", "reversed-set", "reversed-map"],
)
def test_read_only_matches_container_kind(container, expected):
    assert type(read_only(container)) is expected


def test_read_only_is_idempotent():
    ro = read_only(OrderedSequence([1]))
    assert read_only(ro) is ro


def test_reversed_view_delegates_to_container():
    seq = OrderedSequence([1, 2, 3])
    assert list(reversed_view(seq)) == [3, 2, 1]
    assert reversed_view(reversed_view(seq)) is seq


@mark.parametrize("func", [read_only, reversed_view])
def test_rejects_plain_collections(func):
    with raises(TypeError):
        func([1, 2, 3])


def test_package_root_exports_callable_functions():
    import sequenced

    assert callable(sequenced.read_only)
    assert callable(sequenced.reversed_view)
    m = sequenced.OrderedMap({1: "a", 2: "b"})
    assert list(sequenced.reversed_view(m)) == [2, 1]
    assert isinstance(sequenced.read_only(m), ReadOnlyMap)
