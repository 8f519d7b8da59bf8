import pytest

from dsakit.stack_apps import (
    base_converter,
    base_converter_2,
    infix_to_postfix,
    par_checker1,
    par_checker2,
    par_checker3,
)


def test_par_checker1():
    assert par_checker1("()(())") is True
    assert par_checker1("()((()") is False


def test_par_checker1_close_first():
    assert par_checker1(")(") is False


def test_par_checker2():
    assert par_checker2("(){[]}") is True
    assert par_checker2("(){[}]") is False


def test_par_checker3():
    assert par_checker3("(2+3){func}[abc]") is True
    assert par_checker3("(2+3)*(3-1") is False


def test_par_checker3_mismatch():
    assert par_checker3("[a)") is False


def test_base_converter_2():
    assert base_converter_2(7) == "111"
    assert base_converter_2(10) == "1010"
    assert base_converter_2(0) == ""


def test_base_converter():
    assert base_converter(7, 2) == "111"
    assert base_converter(255, 16) == "FF"
    assert base_converter(8, 8) == "10"


def test_infix_to_postfix():
    assert infix_to_postfix("( A + B ) * ( C + D )") == "A B + C D + * "


def test_infix_to_postfix_precedence():
    assert infix_to_postfix("A + B * C") == "A B C * + "


def test_infix_to_postfix_unbalanced():
    assert infix_to_postfix("( A + B") is None


def test_infix_to_postfix_unknown_operator():
    with pytest.raises(ValueError):
        infix_to_postfix("A % B")