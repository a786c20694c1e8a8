import pytest
from packages.engine import MAX_GUESSES, CapacityExceeded, Guess, History


def _guess(word="arose", pattern="bbbbb"):
    return Guess.from_pattern(word, pattern)


def test_history_starts_empty():
    h = History()
    assert len(h) == 0
    assert h.all() == ()
    assert not h.is_full


def test_history_keeps_insertion_order():
    h = History()
    words = ["arose", "unity", "cargo"]
    for w in words:
        h.add(_guess(w))
    assert [g.word for g in h.all()] == words
    assert [g.word for g in h] == words


def test_capacity_bound():
    h = History()
    for _ in range(MAX_GUESSES):
        h.add(_guess())
    assert len(h) == 6 and h.is_full

    before = h.all()
    with pytest.raises(CapacityExceeded) as exc:
        h.add(_guess("unity"))
    assert exc.value.max_guesses == 6
    assert "6" in str(exc.value)
    assert len(h) == 6
    assert h.all() == before


def test_capacity_exceeded_is_value_error():
    assert issubclass(CapacityExceeded, ValueError)


def test_all_is_a_snapshot():
    h = History()
    h.add(_guess())
    snap = h.all()
    h.add(_guess("unity"))
    assert len(snap) == 1 and len(h) == 2


def test_add_rejects_non_guess():
    h = History()
    with pytest.raises(TypeError):
        h.add(("arose", "bbbbb"))
    assert len(h) == 0
