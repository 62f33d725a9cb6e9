import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from kangmath.bigint import Int
from kangmath.field import PrimeField

SECP_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
SECP_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

elements = st.integers(min_value=0, max_value=SECP_P - 1)
nonzero = st.integers(min_value=1, max_value=SECP_P - 1)


@pytest.fixture(scope="module")
def field():
    return PrimeField(SECP_P)


FIELD = PrimeField(SECP_P)


def test_montgomery_r_for_secp_prime(field):
    assert field.r == Int(0x1000003D1)
    assert field.r == Int(2**256 % SECP_P)


def test_montgomery_powers_are_consistent(field):
    assert field.r2 == field.mul(field.r, field.r)
    assert field.r3 == field.mul(field.r2, field.r)
    assert field.r4 == field.mul(field.r3, field.r)


def test_characteristic_is_kept(field):
    assert field.p == Int(SECP_P)


@pytest.mark.parametrize("p", [0, 1, 2, 10, SECP_P + 1, -7])
def test_rejects_invalid_characteristic(p):
    with pytest.raises(ValueError):
        PrimeField(p)


@settings(max_examples=50)
@given(elements, elements)
def test_add_matches_modular_sum(a, b):
    assert FIELD.add(a, b) == Int((a + b) % SECP_P)


@settings(max_examples=50)
@given(elements, elements)
def test_sub_matches_modular_difference(a, b):
    assert FIELD.sub(a, b) == Int((a - b) % SECP_P)


@settings(max_examples=50)
@given(elements, elements)
def test_add_then_sub_round_trip(a, b):
    assert FIELD.sub(FIELD.add(a, b), b) == Int(a)


@settings(max_examples=50)
@given(nonzero)
def test_neg_sums_to_zero(a):
    assert FIELD.add(a, FIELD.neg(a)) == Int(0)


def test_neg_of_zero_is_characteristic(field):
    assert field.neg(0) == Int(SECP_P)


@settings(max_examples=50)
@given(elements)
def test_double_equals_add_self(a):
    assert FIELD.double(a) == FIELD.add(a, a)


@settings(max_examples=50)
@given(elements, elements)
def test_mul_matches_modular_product(a, b):
    assert FIELD.mul(a, b) == Int(a * b % SECP_P)


@settings(max_examples=50)
@given(elements)
def test_square_and_cube(a):
    assert FIELD.square(a) == FIELD.mul(a, a)
    assert FIELD.cube(a) == FIELD.mul(FIELD.square(a), a)


@settings(max_examples=50)
@given(elements, elements)
def test_montgomery_mult_with_r2_gives_product(a, b):
    m = FIELD.montgomery_mult(a, b)
    assert FIELD.montgomery_mult(FIELD.r2, m) == FIELD.mul(a, b)


@settings(max_examples=50)
@given(elements)
def test_montgomery_mult_by_r_is_identity(a):
    assert FIELD.montgomery_mult(a, FIELD.r) == Int(a)


@settings(max_examples=50)
@given(nonzero)
def test_inverse_multiplies_to_one(a):
    assert FIELD.mul(a, FIELD.inv(a)) == Int(1)


@settings(max_examples=30)
@given(nonzero)
def test_inverse_matches_fermat(a):
    assert FIELD.inv(a) == FIELD.exp(a, SECP_P - 2)


@settings(max_examples=30)
@given(nonzero)
def test_inverse_is_involution(a):
    assert FIELD.inv(FIELD.inv(a)) == Int(a)


def test_inverse_of_zero_is_zero(field):
    assert field.inv(0) == Int(0)


def test_inverse_without_solution_is_zero():
    composite = PrimeField(15)
    assert composite.inv(5) == Int(0)


def test_inverse_edge_powers_of_two(field):
    a = 1
    for _ in range(255):
        assert field.mul(a, field.inv(a)) == Int(1)
        b = field.neg(a)
        assert field.mul(b, field.inv(b)) == Int(1)
        a <<= 1


def test_exp_zero_exponent_is_one(field):
    assert field.exp(12345, 0) == Int(1)


def test_exp_rejects_negative_exponent(field):
    with pytest.raises(ValueError):
        field.exp(3, -1)


@settings(max_examples=30)
@given(nonzero)
def test_exp_of_p_minus_one_is_one(a):
    assert FIELD.exp(a, SECP_P - 1) == Int(1)


@settings(max_examples=30)
@given(nonzero)
def test_sqrt_of_square_round_trip(a):
    sq = FIELD.square(a)
    assert FIELD.has_sqrt(sq)
    root = FIELD.sqrt(sq)
    assert FIELD.square(root) == sq


def test_has_sqrt_of_zero_is_false(field):
    assert not field.has_sqrt(0)
    assert field.sqrt(0) == Int(0)


def test_non_residue_sqrt_is_zero(field):
    # -1 is not a square modulo a prime congruent to 3 mod 4
    minus_one = SECP_P - 1
    assert not field.has_sqrt(minus_one)
    assert field.sqrt(minus_one) == Int(0)


@pytest.mark.parametrize("p", [13, 17, 41, 97, 257, 65537])
def test_tonelli_shanks_small_primes(p):
    f = PrimeField(p)
    for a in range(1, p):
        sq = f.square(a)
        root = f.sqrt(sq)
        assert f.square(root) == sq


@pytest.mark.parametrize("p", [13, 17, 7, 11])
def test_non_residues_have_no_root(p):
    f = PrimeField(p)
    squares = {a * a % p for a in range(1, p)}
    for a in range(1, p):
        assert f.has_sqrt(a) == (a in squares)
        if a not in squares:
            assert f.sqrt(a) == Int(0)


def test_order_field_sqrt(field):
    order_field = PrimeField(SECP_N)
    sq = order_field.square(0x123456789ABCDEF)
    assert order_field.square(order_field.sqrt(sq)) == sq


@settings(max_examples=20)
@given(st.lists(nonzero, min_size=1, max_size=20))
def test_batch_inv_matches_single_inversions(values):
    result = FIELD.batch_inv(values)
    assert result == [FIELD.inv(v) for v in values]


def test_batch_inv_empty(field):
    assert field.batch_inv([]) == []


def test_batch_inv_with_zero_gives_zeros(field):
    assert field.batch_inv([3, 0, 5]) == [Int(0), Int(0), Int(0)]


def test_small_field_montgomery_constants():
    f = PrimeField(13)
    assert f.r == Int(2**64 % 13)
    assert f.montgomery_mult(5, f.r) == Int(5)