import pytest

from aocsolve.day03 import part1, part2

EXAMPLE1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part1_example():
    assert part1(EXAMPLE1) == 161


def test_part2_example():
    assert part2(EXAMPLE2) == 48


def test_part1_is_commutative_in_operands():
    assert part1("mul(2,3)") == part1("mul(3,2)")


def test_part1_ignores_surrounding_noise():
    assert part1("xx%mul(2,3)!!") == part1("mul(2,3)")


@pytest.mark.parametrize(
    "noise",
    ["mul ( 2 , 3 )", "mul[2,3]", "mul(1234,5)", "mul(4*", "mul(2,3"],
)
def test_part1_malformed_instructions_count_nothing(noise):
    assert part1(noise) == part1("")


def test_part1_is_additive_over_concatenation():
    a, b = "mul(2,3)xx", "mul(11,8)yy"
    assert part1(a + b) == part1(a) + part1(b)


def test_part1_empty_operand_is_an_error():
    with pytest.raises(ValueError):
        part1("mul(,3)")


def test_part2_without_switches_matches_part1():
    assert part2(EXAMPLE1) == part1(EXAMPLE1)


def test_part2_dont_disables_everything_after():
    assert part2("don't()mul(2,3)mul(4,5)") == part2("")


def test_part2_do_reenables():
    assert part2("don't()mul(9,9)do()mul(2,3)") == part1("mul(2,3)")