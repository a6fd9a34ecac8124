import pytest

from brdocs.utils.cnpj_utils import CNPJ_SPEC, cnpj_checker, is_valid_cnpj, normalize_cnpj


def test_spec_weights():
    assert CNPJ_SPEC.expected_length == 14
    assert len(CNPJ_SPEC.first_weights) == 12
    assert len(CNPJ_SPEC.second_weights) == 13


@pytest.mark.parametrize("digit", "0123456789")
def test_all_digits_equal(digit):
    assert is_valid_cnpj(digit * 14) is False


@pytest.mark.parametrize("cnpj", [None, ""])
def test_null_or_empty(cnpj):
    assert is_valid_cnpj(cnpj) is False


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 15])
def test_invalid_length(size):
    assert is_valid_cnpj("123456789012345"[:size]) is False


@pytest.mark.parametrize(
    "cnpj",
    ["51673426000148", "516734260B0147", "51.673.426/0001.48", "51.673.426/0B01-47", "51673426000B48"],
)
def test_invalid_value(cnpj):
    assert is_valid_cnpj(cnpj) is False


@pytest.mark.parametrize("cnpj", ["51673426000147", "51.673.426/0001-47", "11.222.333/0001-81"])
def test_known_valid(cnpj):
    assert is_valid_cnpj(cnpj) is True


def test_generated_valid(valid_cnpjs, masked_cnpjs):
    for cnpj, masked in zip(valid_cnpjs, masked_cnpjs):
        assert is_valid_cnpj(cnpj) is True
        assert is_valid_cnpj(masked) is True
        assert normalize_cnpj(masked) == cnpj


def test_cpf_is_not_a_cnpj():
    assert is_valid_cnpj("123.123.123-87") is False


def test_custom_message():
    checker = cnpj_checker("{field} invalid!")
    assert checker.validate("516734260B0147") is False
    assert checker.check("516734260B0147").message == "CNPJ invalid!"
