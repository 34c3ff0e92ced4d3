import math

import numpy as np
import pytest

from linecalc.parser import evaluate


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1", 1.0),
        pytest.param("1+2", 3.0),
        pytest.param("2 + 3", 5.0),
        pytest.param("1 * 4 + 5", 9.0),
        pytest.param("1 + 4 * 5", 21.0),
        pytest.param("2 + 3 * 4", 14.0),
        pytest.param("10 - 4 - 3", 3.0),
        pytest.param("10 / 2 / 5", 1.0),
        pytest.param("10 / 5 / 2 / 2", 0.5),
        pytest.param("2 ** 10", 1024.0),
        pytest.param("2 ** 3 ** 2", 64.0, id="power-folds-left"),
        pytest.param("2 ** 2 + 4 * 5", 24.0),
        pytest.param("2 * 3 ** 2", 18.0),
        pytest.param("1 + 2 ** 3 * 2", 17.0),
        pytest.param(".5 + 1.", 1.5),
        pytest.param("0.1 + 0.2", float(np.float32(0.1) + np.float32(0.2))),
        pytest.param("  7\n", 7.0),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: float) -> None:
    assert evaluate(code) == expected_ret_val


def test_result_is_single_precision() -> None:
    result = evaluate("1 / 3")
    assert isinstance(result, np.float32)
    assert result == np.float32(1) / np.float32(3)
    assert float(result) != 1 / 3


def test_whitespace_does_not_matter() -> None:
    assert evaluate("2+3") == evaluate("2 + 3") == evaluate("\t2 +\t 3 ")
    assert evaluate("2**3*4") == evaluate("2 ** 3 * 4")


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1 / 0", math.inf),
        pytest.param("0 - 1 / 0", -math.inf),
        pytest.param("0 ** 0", 1.0),
        pytest.param("10 ** 39", math.inf, id="float32-overflow"),
        pytest.param("99999999999999999999999999999999999999999", math.inf, id="literal-overflow"),
        pytest.param("1 / 0 * 0 + 1", math.nan),
        pytest.param("0 / 0", math.nan),
        pytest.param("1 / 0 - 1 / 0", math.nan),
    ],
)
def test_ieee_special_values(code: str, expected_ret_val: float) -> None:
    result = evaluate(code)
    if math.isnan(expected_ret_val):
        assert math.isnan(result)
    else:
        assert result == pytest.approx(expected_ret_val)
