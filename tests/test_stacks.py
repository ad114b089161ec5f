import io

import pytest

from pushswap.stacks import Stacks, index_stack


def test_swap_a_twice_restores():
    stacks = Stacks([5, 6, 7])
    stacks.swap_a()
    assert stacks.a[:2] == [6, 5]
    stacks.swap_a()
    assert stacks.a == [5, 6, 7]
    assert stacks.operations == ["sa", "sa"]


def test_swap_on_short_stack_does_nothing():
    stacks = Stacks([9])
    stacks.swap_a()
    stacks.swap_b()
    assert stacks.a == [9]
    assert stacks.operations == []


def test_push_b_then_push_a_restores():
    values = [3, 1, 2]
    stacks = Stacks(values)
    stacks.push_b()
    assert stacks.b == [values[0]]
    assert stacks.a == values[1:]
    stacks.push_a()
    assert stacks.a == values
    assert stacks.b == []
    assert stacks.operations == ["pb", "pa"]


def test_push_from_empty_does_nothing():
    stacks = Stacks([1])
    stacks.push_a()
    assert stacks.a == [1]
    assert stacks.operations == []


def test_swap_b_after_two_pushes():
    stacks = Stacks([1, 2, 3])
    stacks.push_b()
    stacks.push_b()
    stacks.swap_b()
    assert stacks.b == [1, 2]
    assert stacks.operations[-1] == "sb"


def test_rotate_moves_top_to_bottom():
    values = [4, 8, 15, 16]
    stacks = Stacks(values)
    stacks.rotate_a()
    assert stacks.a[-1] == values[0]
    assert stacks.a[:-1] == values[1:]


def test_rotate_and_reverse_are_inverse():
    values = [4, 8, 15, 16]
    stacks = Stacks(values)
    stacks.rotate_a()
    stacks.reverse_rotate_a()
    assert stacks.a == values
    assert stacks.operations == ["ra", "rra"]


def test_rotating_full_cycle_restores():
    values = [10, 20, 30, 40, 50]
    stacks = Stacks(values)
    for _ in values:
        stacks.rotate_a()
    assert stacks.a == values


def test_operations_written_to_stream():
    out = io.StringIO()
    stacks = Stacks([2, 1, 3], out)
    stacks.swap_a()
    stacks.rotate_a()
    stacks.reverse_rotate_a()
    stacks.push_b()
    assert out.getvalue().splitlines() == stacks.operations


@pytest.mark.parametrize(
    "values", [[40, -5, 12], [7, 3, 9, 1, 100], [-2147483648, 2147483647]]
)
def test_index_stack_gives_a_permutation_of_ranks(values):
    ranks = index_stack(values)
    assert sorted(ranks) == list(range(len(values)))


@pytest.mark.parametrize("values", [[40, -5, 12], [7, 3, 9, 1, 100]])
def test_index_stack_keeps_order(values):
    ranks = index_stack(values)
    for i, x in enumerate(values):
        for j, y in enumerate(values):
            assert (x < y) == (ranks[i] < ranks[j])


def test_index_stack_small_example():
    assert index_stack([40, -5, 12]) == [2, 0, 1]