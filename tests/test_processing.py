import statistics

import pytest

from isingreset.processing import InputParser, mean_of, mod, variance


def test_get_option_returns_following_token():
    parser = InputParser(["-T", "2.5", "-r", "0.7"])
    assert parser.get_option("-T") == "2.5"
    assert parser.get_option("-r") == "0.7"


def test_get_option_missing_returns_empty():
    parser = InputParser(["-T", "2.5"])
    assert parser.get_option("-m0") == ""


def test_get_option_last_token_returns_empty():
    parser = InputParser(["-T", "2.5", "-s"])
    assert parser.get_option("-s") == ""


def test_get_option_uses_first_occurrence():
    parser = InputParser(["-t", "10", "-t", "20"])
    assert parser.get_option("-t") == "10"


def test_get_option_value_may_look_like_flag():
    parser = InputParser(["-T", "-t"])
    assert parser.get_option("-T") == "-t"


def test_has_option():
    parser = InputParser(["-h", "-L", "50"])
    assert parser.has_option("-h") is True
    assert parser.has_option("-L") is True
    assert parser.has_option("-N") is False


def test_parser_accepts_generator():
    parser = InputParser(token for token in ["-N", "100"])
    assert parser.get_option("-N") == "100"
    assert parser.has_option("-N") is True


def test_mod_wraps_negative_index():
    assert mod(-1, 10) == 9


@pytest.mark.parametrize("a", range(-25, 26))
@pytest.mark.parametrize("b", [1, 2, 7, 10])
def test_mod_positive_modulus_invariants(a, b):
    result = mod(a, b)
    assert 0 <= result < b
    assert (a - result) % b == 0


def test_mod_matches_python_for_positive_modulus():
    for a in range(-40, 40):
        assert mod(a, 9) == a % 9


def test_mod_zero_raises():
    with pytest.raises(ZeroDivisionError):
        mod(3, 0)


def test_mean_of_matches_statistics():
    values = [0.5, -1.25, 3.0, 7.75, 2.0]
    assert mean_of(values) == pytest.approx(statistics.fmean(values))


def test_mean_of_integers():
    assert mean_of([1, 2, 3]) == 2


def test_mean_of_empty_raises():
    with pytest.raises(ValueError):
        mean_of([])


def test_variance_matches_population_variance():
    values = [0.5, -1.25, 3.0, 7.75, 2.0]
    assert variance(values) == pytest.approx(statistics.pvariance(values))


def test_variance_of_constant_sequence_is_zero():
    assert variance([4.0, 4.0, 4.0, 4.0]) == 0.0


def test_variance_is_shift_invariant():
    values = [1.0, 2.0, 6.0, -3.0]
    shifted = [value + 100.0 for value in values]
    assert variance(shifted) == pytest.approx(variance(values))


def test_variance_empty_raises():
    with pytest.raises(ValueError):
        variance([])