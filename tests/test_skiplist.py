import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodeck.skiplist import MAX_LEVEL, SkipList, main

EXAMPLE = [3, 6, 7, 9, 12, 19, 17, 26, 21, 25]


def _list(keys, seed=0, max_level=MAX_LEVEL):
    skip_list = SkipList(max_level=max_level, rng=random.Random(seed))
    for key in keys:
        skip_list.insert(key)
    return skip_list


def test_example_search_and_remove():
    skip_list = _list(EXAMPLE)
    assert skip_list.search(19)
    assert not skip_list.search(20)
    assert skip_list.remove(19)
    assert not skip_list.remove(20)
    assert not skip_list.search(19)
    assert list(skip_list) == sorted(set(EXAMPLE) - {19})


def test_duplicate_insert_is_refused():
    skip_list = _list([5])
    assert not skip_list.insert(5)
    assert len(skip_list) == 1


def test_negative_max_level_rejected():
    with pytest.raises(ValueError):
        SkipList(max_level=-1)


def test_zero_max_level_keeps_one_level():
    skip_list = _list(EXAMPLE, max_level=0)
    assert skip_list.levels() == [sorted(EXAMPLE)]


def test_same_seed_gives_same_levels():
    first = _list(EXAMPLE, seed=7).levels()
    second = _list(EXAMPLE, seed=7).levels()
    assert first[0] == [3, 6, 7, 9, 12, 17, 19, 21, 25, 26]
    assert 1 <= len(first) <= MAX_LEVEL + 1
    assert first == second


@given(st.lists(st.integers(-500, 500)), st.integers(0, 2**32))
def test_levels_are_sorted_nested_subsets(keys, seed):
    levels = _list(keys, seed).levels()
    assert levels[0] == sorted(set(keys))
    assert len(levels) <= MAX_LEVEL + 1
    for lower, upper in zip(levels, levels[1:]):
        assert upper == sorted(upper)
        assert set(upper) <= set(lower)
    if len(levels) > 1:
        assert levels[-1]


@given(st.lists(st.integers(-50, 50)), st.lists(st.integers(-50, 50)), st.integers(0, 1000))
def test_behaves_like_a_set(added, removed, seed):
    skip_list = _list(added, seed)
    expected = set(added)
    for key in removed:
        assert skip_list.remove(key) == (key in expected)
        expected.discard(key)
    assert list(skip_list) == sorted(expected)
    assert all(key in skip_list for key in expected)
    for lower, upper in zip(skip_list.levels(), skip_list.levels()[1:]):
        assert set(upper) <= set(lower)


def test_main_reports_search_and_delete(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Searching for 19: Found" in out
    assert "Searching for 20: Not Found" in out
    assert "Successfully deleted key 19" in out
    assert "Key 20 not found in the list" in out