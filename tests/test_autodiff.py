import logging
import math
import threading

import numpy as np
import pytest

from dualdiff import function as ddf
from dualdiff.autodiff import autodiff
from dualdiff.autodiff.dual import Dual

POINTS = [-3.5, -1.0, -0.25, 0.0, 0.5, 2.0, 7.25]


@pytest.mark.parametrize("a", POINTS)
def test_identity(a):
    assert autodiff.diff(lambda x: x, a) == (a, 1.0)


@pytest.mark.parametrize("a", POINTS)
def test_constant(a):
    assert autodiff.diff(lambda x: Dual(4.2), a) == (4.2, 0.0)
    assert autodiff.diff(lambda x: 4.2 + 0 * x, a)[1] == pytest.approx(0.0)
    assert autodiff.diff(lambda x: 4.2, a) == (4.2, 0.0)


@pytest.mark.parametrize("a", POINTS)
@pytest.mark.parametrize("m", [-2.0, 0.0, 3.0])
def test_linearity(a, m):
    assert autodiff.diff(lambda x: m * x, a) == (m * a, m)


@pytest.mark.parametrize("a", POINTS)
def test_product_rule(a):
    assert autodiff.diff(lambda x: x * x, a) == (a * a, 2 * a)


@pytest.mark.parametrize("a", [x for x in POINTS if x != 0.0])
def test_quotient_rule(a):
    value, derivative = autodiff.diff(lambda x: 1.0 / x, a)
    assert value == pytest.approx(1 / a)
    assert derivative == pytest.approx(-1 / (a * a))


@pytest.mark.parametrize("a", POINTS)
def test_transcendentals(a):
    assert autodiff.diff(ddf.sin, a) == pytest.approx((math.sin(a), math.cos(a)))
    assert autodiff.diff(ddf.exp, a) == pytest.approx((math.exp(a), math.exp(a)))


@pytest.mark.parametrize("a", POINTS)
def test_composition(a):
    _, derivative = autodiff.diff(lambda x: ddf.exp(ddf.sin(x)), a)
    expected = math.exp(math.sin(a)) * math.cos(a)
    assert derivative == pytest.approx(expected, abs=1e-9)


def test_mixed_operands():
    assert autodiff.diff(lambda x: 2.0 * x + 1.0, 3.0) == (7.0, 2.0)
    assert autodiff.diff(lambda x: 1 - x / 2, 3.0) == (-0.5, -0.5)


def test_ln_at_zero():
    value, derivative = autodiff.diff(lambda x: x.ln(), 0.0)
    assert value == -math.inf
    assert math.isinf(derivative) or math.isnan(derivative)


def test_ieee_propagation():
    value, derivative = autodiff.diff(lambda x: 1 / (x - 1), 1.0)
    assert value == math.inf
    assert derivative == -math.inf

    value, derivative = autodiff.diff(lambda x: ddf.sqrt(x), -1.0)
    assert math.isnan(value)
    assert math.isnan(derivative)


def test_point_types():
    assert autodiff.diff(lambda x: x * x, 3) == (9.0, 6.0)
    assert autodiff.diff(lambda x: x * x, np.float64(3.0)) == (9.0, 6.0)
    assert autodiff.diff(lambda x: x * x, 10**400) == (math.inf, math.inf)
    assert autodiff.diff(lambda x: 10**400, 1.0) == (math.inf, 0.0)

    with pytest.raises(TypeError):
        autodiff.diff(lambda x: x, "3.0")  # type: ignore

    with pytest.raises(TypeError):
        autodiff.diff(lambda x: x, Dual.variable(3.0))  # type: ignore

    with pytest.raises(TypeError):
        autodiff.diff(lambda x: str(x), 3.0)  # type: ignore


def test_deriv():
    deriv1 = autodiff.deriv(lambda x: (x + ddf.sin(x**2)) / x)
    assert pytest.approx(deriv1(1.4), 1e-5) == -1.23095

    def f(x):
        return ddf.tan(x) * ddf.log(x)

    df = autodiff.deriv(f)
    assert df.__name__ == "f"
    assert df(0.8) == pytest.approx(math.log(0.8) / math.cos(0.8) ** 2 + math.tan(0.8) / 0.8)


def test_primitive():
    @autodiff.primitive(lambda x: 1 / (1 + x * x))
    def arctan(x):
        return math.atan(x)

    assert arctan(1.0) == pytest.approx(math.pi / 4)
    assert arctan.__name__ == "arctan"

    value, derivative = autodiff.diff(lambda x: arctan(2 * x), 0.5)
    assert value == pytest.approx(math.pi / 4)
    assert derivative == pytest.approx(1.0)


def test_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger="dualdiff"):
        autodiff.diff(lambda x: 3 * x, 2.0)

    assert "value=6.0, derivative=3.0" in caplog.text


def test_threads():
    results: dict[int, tuple[float, float]] = {}

    def work(n):
        results[n] = autodiff.diff(lambda x: x**3 + ddf.log(x), float(n))

    threads = [threading.Thread(target=work, args=(n,)) for n in range(1, 9)]

    for thread in threads:
        thread.start()

    for thread in threads:
        thread.join()

    for n, (value, derivative) in results.items():
        assert value == pytest.approx(n**3 + math.log(n))
        assert derivative == pytest.approx(3 * n**2 + 1 / n)
