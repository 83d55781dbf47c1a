import pytest

from imkit.params import MAX_PARAM_LEN, Params, ParamType


def test_empty_matches_no_types():
    params = Params()
    assert params.match()
    assert not params.match(ParamType.INT)
    assert params.extract() == ()
    assert len(params) == 0


def test_push_and_extract_round_trip():
    marker = object()
    params = Params().push((ParamType.INT, 5), (ParamType.PTR, marker))
    assert params.match(ParamType.INT, ParamType.PTR)
    assert params.extract() == (5, marker)


def test_push_returns_same_params():
    params = Params()
    assert params.push((ParamType.DOUBLE, 1.5)) is params
    assert params.extract() == (1.5,)


def test_match_checks_order_and_length():
    params = Params((ParamType.INT, 1), (ParamType.PTR, "x"))
    assert not params.match(ParamType.PTR, ParamType.INT)
    assert not params.match(ParamType.INT)
    assert not params.match(ParamType.INT, ParamType.PTR, ParamType.INT)


def test_iteration_yields_pairs():
    params = Params((ParamType.LONG, 9), (ParamType.CHAR, "a"))
    kinds = [kind for kind, _ in params]
    assert kinds == [ParamType.LONG, ParamType.CHAR]


def test_unsigned_wraps_negative():
    params = Params((ParamType.UNSIGNED, -1))
    assert params.extract() == (0xFFFFFFFF,)


def test_unsigned_char_wraps_overflow():
    params = Params((ParamType.UNSIGNED_CHAR, 256))
    assert params.extract() == (0,)


def test_short_wraps_to_negative():
    params = Params((ParamType.SHORT, 32768))
    assert params.extract() == (-32768,)


def test_values_in_range_are_unchanged():
    params = Params(
        (ParamType.SHORT, -1),
        (ParamType.INT, 123),
        (ParamType.UNSIGNED_SHORT, 100),
        (ParamType.UNSIGNED_LONG, 2**40),
    )
    assert params.extract() == (-1, 123, 100, 2**40)


def test_char_accepts_single_character():
    params = Params((ParamType.CHAR, "A"))
    assert params.extract() == (ord("A"),)


def test_char_rejects_longer_string():
    with pytest.raises(TypeError):
        Params((ParamType.CHAR, "AB"))


def test_float_loses_precision_double_keeps_it():
    params = Params((ParamType.FLOAT, 0.1), (ParamType.DOUBLE, 0.1))
    as_float, as_double = params.extract()
    assert as_double == 0.1
    assert as_float != 0.1
    assert abs(as_float - 0.1) < 1e-6


def test_float_exact_value_kept():
    params = Params((ParamType.FLOAT, 0.5))
    assert params.extract() == (0.5,)


def test_limit_is_enforced():
    params = Params(*[(ParamType.INT, i) for i in range(MAX_PARAM_LEN)])
    assert len(params) == MAX_PARAM_LEN
    with pytest.raises(OverflowError):
        params.push((ParamType.INT, 99))
    assert len(params) == MAX_PARAM_LEN


def test_partial_push_keeps_earlier_values():
    params = Params(*[(ParamType.INT, i) for i in range(MAX_PARAM_LEN - 1)])
    with pytest.raises(OverflowError):
        params.push((ParamType.INT, 100), (ParamType.INT, 101))
    assert len(params) == MAX_PARAM_LEN
    assert params.extract()[-1] == 100


def test_unknown_type_rejected():
    with pytest.raises(ValueError):
        Params((42, 1))