import pytest

from dstructs.bitwise import subset_sums, subsets_reaching, sum_bits

ARRAY = [9, 3, 4, 5, 12]


def test_sum_bits_of_47():
    assert sum_bits(47) == 5


@pytest.mark.parametrize("power", [0, 1, 10, 31])
def test_sum_bits_of_powers_of_two(power):
    assert sum_bits(1 << power) == 1


def test_sum_bits_all_ones():
    assert sum_bits((1 << 12) - 1) == 12


@pytest.mark.parametrize("n", [0, -1, -47])
def test_sum_bits_non_positive_is_zero(n):
    assert sum_bits(n) == 0


def test_sum_bits_of_hex_constant_matches_bin():
    value = 0x13355777
    assert sum_bits(value) == bin(value).count("1")


def test_subset_sums_has_one_entry_per_mask():
    sums = subset_sums(ARRAY)
    assert len(sums) == 1 << len(ARRAY)
    assert sums[0] == 0
    assert sums[-1] == sum(ARRAY)


def test_subset_sums_single_elements():
    sums = subset_sums(ARRAY)
    for bit, value in enumerate(ARRAY):
        assert sums[1 << bit] == value


def test_subset_sums_complement_invariant():
    sums = subset_sums(ARRAY)
    full = (1 << len(ARRAY)) - 1
    for mask, total in enumerate(sums):
        assert total + sums[full ^ mask] == sum(ARRAY)


def test_source_target_unreachable():
    assert subsets_reaching(ARRAY, 22) == []


def test_subsets_reaching_sum_to_target():
    found = subsets_reaching(ARRAY, 12)
    assert found
    assert all(sum(subset) == 12 for subset in found)
    assert (12,) in found


def test_subsets_reaching_zero_is_empty_subset():
    assert subsets_reaching(ARRAY, 0) == [()]


def test_subsets_reaching_full_sum():
    assert subsets_reaching(ARRAY, sum(ARRAY)) == [tuple(ARRAY)]