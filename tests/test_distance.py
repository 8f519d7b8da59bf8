import pytest

from dsakit import distance


@pytest.mark.parametrize("func", [distance.hamming_distance1, distance.hamming_distance2])
def test_hamming_numbers(func):
    assert func(1, 2) == 2


@pytest.mark.parametrize("func", [distance.hamming_distance1, distance.hamming_distance2])
def test_hamming_numbers_more(func):
    assert func(0, 0) == 0
    assert func(7, 7) == 0
    assert func(0, 255) == 8
    assert func(2**63, 0) == 1


@pytest.mark.parametrize("func", [distance.hamming_distance1, distance.hamming_distance2])
def test_hamming_numbers_negative(func):
    with pytest.raises(ValueError):
        func(-1, 3)


def test_hamming_str():
    assert distance.hamming_distance_str("abce", "edcf") == 3
    assert distance.hamming_distance_str("", "") == 0
    assert distance.hamming_distance_str("same", "same") == 0


def test_hamming_str_length_mismatch():
    with pytest.raises(ValueError):
        distance.hamming_distance_str("abc", "ab")


@pytest.mark.parametrize("func", [distance.edit_distance1, distance.edit_distance2])
def test_edit_distance_source_cases(func):
    assert func("abce", "adcf") == 2
    assert func("bdfc", "adcf") == 3


@pytest.mark.parametrize("func", [distance.edit_distance1, distance.edit_distance2])
def test_edit_distance_known(func):
    assert func("kitten", "sitting") == 3
    assert func("same", "same") == 0
    assert func("", "abc") == 3
    assert func("abcd", "") == 4


@pytest.mark.parametrize("func", [distance.edit_distance1, distance.edit_distance2])
def test_edit_distance_empty_counts_bytes(func):
    assert func("", "我") == 3


@pytest.mark.parametrize("pair", [("flaw", "lawn"), ("intention", "execution"), ("a", "b")])
def test_edit_distance_variants_agree_and_symmetric(pair):
    a, b = pair
    d = distance.edit_distance1(a, b)
    assert d == distance.edit_distance2(a, b)
    assert d == distance.edit_distance1(b, a)