import pytest

from algocraft.strings.lcs import lcs_lengths, longest_common_subsequence


PAIRS = [
    ("ABCBDAB", "BDCABA"),
    ("AGGTAB", "GXTXAYB"),
    ("abc", "def"),
    ("", "abc"),
    ("same", "same"),
    ("dynamic", "programming"),
]


@pytest.mark.parametrize("s1, s2", PAIRS)
def test_result_is_common_subsequence(s1, s2):
    lcs = longest_common_subsequence(s1, s2)
    first = iter(s1)
    unmatched_in_first = [ch for ch in lcs if ch not in first]
    second = iter(s2)
    unmatched_in_second = [ch for ch in lcs if ch not in second]
    assert unmatched_in_first == []
    assert unmatched_in_second == []


@pytest.mark.parametrize("s1, s2", PAIRS)
def test_result_length_matches_table(s1, s2):
    lengths = lcs_lengths(s1, s2)
    assert len(lengths) == len(s1) + 1
    assert all(len(row) == len(s2) + 1 for row in lengths)
    assert len(longest_common_subsequence(s1, s2)) == lengths[-1][-1]


@pytest.mark.parametrize("s1, s2", PAIRS)
def test_symmetric_length(s1, s2):
    assert len(longest_common_subsequence(s1, s2)) == len(
        longest_common_subsequence(s2, s1)
    )


def test_identical_strings():
    assert longest_common_subsequence("same", "same") == "same"


def test_disjoint_strings():
    assert longest_common_subsequence("abc", "def") == ""


def test_empty_input():
    assert longest_common_subsequence("", "abc") == ""
    assert lcs_lengths("", "") == [[0]]


def test_classic_length():
    assert len(longest_common_subsequence("ABCBDAB", "BDCABA")) == 4


def test_table_is_monotonic():
    lengths = lcs_lengths("dynamic", "programming")
    for i in range(1, len(lengths)):
        for j in range(1, len(lengths[0])):
            assert lengths[i][j] >= lengths[i - 1][j]
            assert lengths[i][j] >= lengths[i][j - 1]
            assert lengths[i][j] <= lengths[i - 1][j - 1] + 1