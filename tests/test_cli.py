import itertools
import random

import pytest

from pushswap.cli import main, solve
from pushswap.parsing import InputError
from pushswap.stack import Stacks


def _apply(values, operations):
    stacks = Stacks(values)
    for operation in operations:
        getattr(stacks, operation)()
    return stacks.values("a")


def test_solve_sorted_input_needs_nothing():
    assert solve(["1", "2", "3"]) == []


def test_solve_two_numbers():
    assert solve(["2", "1"]) == ["sa"]


def test_solve_single_argument_is_split():
    operations = solve(["3 2 1"])
    assert _apply([3, 2, 1], operations) == [1, 2, 3]


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3, 4, 5])))
def test_solve_five_sorts(values):
    operations = solve([str(v) for v in values])
    assert _apply(values, operations) == [1, 2, 3, 4, 5]


def test_solve_many_sorts():
    values = random.Random(7).sample(range(-500, 500), 50)
    operations = solve([str(v) for v in values])
    assert _apply(values, operations) == sorted(values)


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["abc"], ["2147483648"], ["1", "-"], [""], ["1 2 2"]],
)
def test_solve_rejects_bad_input(args):
    with pytest.raises(InputError):
        solve(args)


def test_main_prints_operations(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_main_prints_error(capsys):
    assert main(["1", "1"]) == 1
    assert capsys.readouterr().out == "Error\n"


def test_main_without_arguments(capsys):
    assert main([]) == -1
    assert capsys.readouterr().out == ""


def test_main_sorted_prints_nothing(capsys):
    assert main(["-1 0 5"]) == 0
    assert capsys.readouterr().out == ""