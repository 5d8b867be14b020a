import io
import sys

import pytest

from dsakit.sorting import bubble_sort, insertion_sort, main, merge_sort, quick_sort

CASES = [
    [],
    [1],
    [5, -2, 9, 0, -2],
    [64, 34, 25, 12, 22],
    list(range(10, 0, -1)),
    [3, 3, 3, 1, 1],
]


@pytest.mark.parametrize("values", CASES)
def test_output_is_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values)[0] == expected
    assert insertion_sort(values)[0] == expected
    assert quick_sort(values)[0] == expected
    assert merge_sort(values)[0] == expected


def test_input_not_mutated():
    values = [64, 34, 25, 12, 22]
    snapshot = list(values)
    bubble_sort(values)
    assert values == snapshot
    insertion_sort(values)
    assert values == snapshot
    quick_sort(values)
    assert values == snapshot
    merge_sort(values)
    assert values == snapshot


def test_trivial_inputs_take_no_steps():
    for values in ([], [42]):
        assert bubble_sort(values)[1] == 0
        assert insertion_sort(values)[1] == 0
        assert quick_sort(values)[1] == 0
        assert merge_sort(values)[1] == 0


@pytest.mark.parametrize("values", CASES)
def test_bubble_steps_depend_only_on_length(values):
    n = len(values)
    assert bubble_sort(values)[1] == n * (n - 1) // 2
    assert bubble_sort(values)[1] == bubble_sort(sorted(values))[1]


def test_insertion_on_sorted_input_places_each_once():
    values = list(range(7))
    assert insertion_sort(values)[1] == len(values) - 1


def test_insertion_reverse_costs_more_than_sorted():
    values = list(range(7))
    assert insertion_sort(values[::-1])[1] > insertion_sort(values)[1]


def test_quick_on_sorted_input_compares_every_pair_once():
    values = list(range(8))
    n = len(values)
    assert quick_sort(values)[1] == n * (n - 1) // 2


def test_merge_on_sorted_power_of_two():
    assert merge_sort(list(range(8)))[1] == 12


def test_merge_steps_bounded_by_bubble():
    values = [9, 4, 7, 1, 8, 2, 6, 3, 5]
    assert merge_sort(values)[1] <= bubble_sort(values)[1]


def test_main_quick(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n64 34 25 12 22\n"))
    assert main(["quick"]) == 0
    out = capsys.readouterr().out
    assert "Original: 64 34 25 12 22" in out
    assert "Quick Sort Steps:" in out
    assert "Sorted: 12 22 25 34 64" in out


def test_main_default_is_bubble(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n3 1 2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Bubble Sort Steps: 3" in out
    assert "Sorted: 1 2 3" in out


def test_main_rejects_short_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("4\n1 2\n"))
    assert main(["merge"]) == 1