from edakit.intinf import INFINITY, IntInf


def test_infinity_prints_as_plus_inf():
    assert str(IntInf(999_999_999) + IntInf(1)) == "+Inf"
    assert str(INFINITY + IntInf(5)) == "+Inf"


def test_finite_prints_its_number():
    assert str(IntInf(42)) == "42"
    assert str(IntInf(-3)) == "-3"


def test_finite_sum():
    assert IntInf(3) + IntInf(4) == IntInf(7)


def test_infinity_absorbs_sums():
    assert INFINITY + IntInf(5) == INFINITY
    assert IntInf(5) + INFINITY == INFINITY
    assert (INFINITY + INFINITY).is_infinite


def test_sum_saturates_at_threshold():
    assert IntInf(999_999_999) + IntInf(1) == INFINITY
    assert not (IntInf(999_999_998) + IntInf(1)).is_infinite


def test_adding_plain_ints():
    assert IntInf(2) + 3 == IntInf(5)
    assert 3 + IntInf(2) == IntInf(5)


def test_ordering():
    assert IntInf(-4) < IntInf(3)
    assert IntInf(5) < INFINITY
    assert not INFINITY < INFINITY
    assert INFINITY > IntInf(10**8)
    assert max(IntInf(1), INFINITY, IntInf(7)) == INFINITY


def test_equality_and_hash_agree():
    assert IntInf(8) == IntInf(8)
    assert hash(IntInf(8)) == hash(IntInf(8))
    assert len({IntInf(8), IntInf(8), IntInf(9)}) == 2