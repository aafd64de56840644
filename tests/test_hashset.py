import random

import pytest

from setkit.hashset import HashSet, HashSetIterator

SHORT_OPS = [
    ("add", 5, True),
    ("add", 1, True),
    ("add", 10, True),
    ("add", 7, True),
    ("add", 1, False),
    ("add", 10, False),
    ("add", -3, True),
    ("size", None, 5),
    ("search", 10, True),
    ("search", 16, False),
    ("remove", 1, True),
    ("remove", 6, False),
    ("size", None, 4),
]


def _fill(s, values, repeat=1):
    for value in values:
        for _ in range(repeat):
            s.add(value)
    return s


def _make(values, repeat=1):
    return _fill(HashSet(), values, repeat)


def _collect(s):
    values = []
    it = s.iterator()
    while it.valid():
        values.append(it.get_current())
        it.next()
    return values


def _run_ops(s, ops):
    for name, arg, expected in ops:
        method = getattr(s, name)
        result = method() if arg is None else method(arg)
        assert result == expected, (name, arg)


def _remove_and_check(s, values, expected):
    for value in values:
        assert s.remove(value) is expected(value)
        assert len(_collect(s)) == s.size()


def _assert_exhausted(it):
    assert it.valid() is False
    with pytest.raises(IndexError):
        it.next()
    with pytest.raises(IndexError):
        it.get_current()


def test_short():
    s = HashSet()
    assert s.is_empty() is True
    assert s.size() == 0
    _run_ops(s, SHORT_OPS)
    it = s.iterator()
    it.first()
    assert sum(_collect(s)) == 19


def test_union():
    s1 = _make(range(3))
    s2 = _make(i * 2 for i in range(2, 5))
    s1.union(s2)
    assert s1.size() == 6
    assert sum(_collect(s1)) == 21
    assert s2.size() == 3


def test_create():
    s = HashSet()
    assert s.size() == 0
    assert s.is_empty() is True
    for i in range(-10, 10):
        assert s.search(i) is False
        assert s.remove(i) is False
    assert s.iterator().valid() is False


def test_add():
    s = HashSet()
    batches = [
        (range(10), 10),
        (range(-10, 20), 30),
        (range(-100, 100), 200),
    ]
    for values, expected_size in batches:
        _fill(s, values)
        assert s.is_empty() is False
        assert s.size() == expected_size
    for i in range(-200, 200):
        assert s.search(i) is (-100 <= i < 100)
    assert len(_collect(s)) == s.size()
    _fill(s, range(10000, -10000, -1))
    assert len(_collect(s)) == s.size()
    assert s.size() == 20000


def test_remove():
    m = HashSet()
    _remove_and_check(m, range(-100, 100), lambda i: False)
    assert m.size() == 0

    _fill(m, range(-100, 100, 2))
    _remove_and_check(m, range(-100, 100), lambda i: i % 2 == 0)
    assert m.size() == 0

    _fill(m, range(-100, 101, 2))
    _remove_and_check(m, range(100, -100, -1), lambda i: i % 2 == 0)
    assert m.size() == 1
    m.remove(-100)
    assert m.size() == 0

    _fill(m, range(-100, 100), repeat=5)
    assert m.size() == 200
    for i in range(-200, 200):
        present = -100 <= i < 100
        assert m.remove(i) is present
        assert m.remove(i) is False
        assert len(_collect(m)) == m.size()
    assert m.size() == 0


def test_iterator_on_empty_set():
    _assert_exhausted(HashSet().iterator())


def test_iterator_single_repeated_element():
    it = _make([33], repeat=100).iterator()
    assert it.valid() is True
    assert it.get_current() == 33
    it.next()
    assert it.valid() is False
    it.first()
    assert it.valid() is True


def test_iterator_steps_and_rewind():
    it = _make(range(-100, 100), repeat=3).iterator()
    assert it.valid() is True
    for _ in range(200):
        it.next()
    assert it.valid() is False
    it.first()
    assert it.valid() is True


def test_iterator_over_multiples():
    it = HashSetIterator(_make(range(0, 200, 4)))
    assert it.valid() is True
    count = 0
    while it.valid():
        assert it.get_current() % 4 == 0
        it.next()
        count += 1
    _assert_exhausted(it)
    assert count == 50


def test_mix():
    s = HashSet()
    first = 11
    last = 11
    count = 3

    def take_first():
        nonlocal first
        assert s.search(first) is True
        assert s.remove(first) is True
        first = (first + 7) % 11111

    for i in range(100):
        for _ in range(count):
            s.add(last)
            last = (last + 7) % 11111
        take_first()
        if i % 10 == 0:
            count += 1
    while not s.is_empty():
        take_first()


def test_quantity():
    s = HashSet()
    for step in range(10, 0, -1):
        _fill(s, range(-30000, 30000, step))
    assert s.size() == 60000
    it = s.iterator()
    assert it.valid() is True
    for _ in range(s.size()):
        it.next()
    assert it.valid() is False
    it.first()
    while it.valid():
        assert s.search(it.get_current()) is True
        it.next()
    assert it.valid() is False
    for _ in range(2):
        for j in range(40000, -40001, -1):
            s.remove(j)
    assert s.size() == 0


def test_matches_builtin_set_under_random_operations():
    rng = random.Random(1234)
    s = HashSet()
    reference = set()
    for _ in range(5000):
        value = rng.randint(-300, 300)
        if rng.random() < 0.55:
            assert s.add(value) is (value not in reference)
            reference.add(value)
        else:
            assert s.remove(value) is (value in reference)
            reference.discard(value)
        assert s.size() == len(reference)
    for value in range(-300, 301):
        assert s.search(value) is (value in reference)
    assert sorted(_collect(s)) == sorted(reference)


def test_python_protocols():
    s = _make((4, -9, 17, 4))
    assert len(s) == 3
    assert 17 in s
    assert 5 not in s
    assert "17" not in s
    assert sorted(s) == [-9, 4, 17]
    assert list(s) == _collect(s)


@pytest.mark.parametrize(
    "extra, expected",
    [((), [1, 2, 3]), ((3, 4), [1, 2, 3, 4])],
)
def test_union_with_empty_and_overlap(extra, expected):
    s = _make((1, 2, 3))
    s.union(_make(extra))
    assert sorted(s) == expected
    assert s.is_empty() is False