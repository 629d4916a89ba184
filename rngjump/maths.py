# rngjump/maths.py
# Modular arithmetic for affine recurrences x -> a*x + c (mod m).
# Every function works on unsigned values of a fixed bit width (8..128) and
# keeps intermediates inside that width where the width has no wider partner.

WIDTHS = (8, 16, 32, 64, 128)


def width_mask(bits):
    assert bits in WIDTHS, f"unsupported width {bits}"
    return (1 << bits) - 1


def _add_mod(x, y, m):
    # x, y < m; never forms x + y when that could reach m or beyond
    if x >= m - y:
        return x - (m - y)
    return x + y


def mul_mod_generic(a, b, m, bits=128):
    """(a * b) mod m by binary long multiplication.

    Only the running result and the doubling copy of b are ever stored, and
    both stay below m, so nothing exceeds the given width.
    """
    mask = width_mask(bits)
    assert 0 < m <= mask, "modulus must be non-zero and fit the width"
    assert 0 <= a <= mask and 0 <= b <= mask
    if a >= m:
        a %= m
    b_work = b % m if b >= m else b
    result = 0
    while a:
        if a & 1:
            result = _add_mod(result, b_work, m)
        a >>= 1
        b_work = _add_mod(b_work, b_work, m)
    return result


def _mul_mod_widen(a, b, m, bits):
    mask = width_mask(bits)
    assert 0 < m <= mask, "modulus must be non-zero and fit the width"
    assert 0 <= a <= mask and 0 <= b <= mask
    # the product of two values of this width fits the next width up
    return (a * b) % m


# widths with a wider native partner widen; the widest one doubles bitwise
_MUL_MOD = {
    8: _mul_mod_widen,
    16: _mul_mod_widen,
    32: _mul_mod_widen,
    64: _mul_mod_widen,
    128: mul_mod_generic,
}


def mul_mod(a, b, m, bits=32):
    return _MUL_MOD[bits](a, b, m, bits)


def pow_mod(base, n, m, bits=32):
    """base ** n (mod m) by repeated squaring."""
    assert n >= 0, "exponent must be non-negative"
    result = 1 % m
    temp_exp = base % m
    while True:
        if n & 1:
            result = mul_mod(result, temp_exp, m, bits)
        n >>= 1
        if n == 0:
            break
        temp_exp = mul_mod(temp_exp, temp_exp, m, bits)
    return result


def wrapping_pow(base, n, bits=32):
    """base ** n (mod 2**bits)."""
    assert n >= 0, "exponent must be non-negative"
    mask = width_mask(bits)
    result = 1
    temp_exp = base & mask
    while True:
        if n & 1:
            result = (result * temp_exp) & mask
        n >>= 1
        if n == 0:
            break
        temp_exp = (temp_exp * temp_exp) & mask
    return result


def wrapping_geom_series(r, n, bits=32):
    """1 + r + r**2 + ... + r**(n-1) (mod 2**bits).

    Uses S(2k; r) = (1 + r) * S(k; r**2) and S(2k+1; r) = r**2k + S(2k; r),
    folded into a loop. `mult` carries the (1 + r) factors collected so far.
    """
    assert n >= 0, "term count must be non-negative"
    mask = width_mask(bits)
    temp_r = r & mask
    mult = 1
    result = 0
    while n > 1:
        if n & 1:
            temp_mult = wrapping_pow(temp_r, n - 1, bits)
            result = (result + temp_mult * mult) & mask
        mult = (mult * (1 + temp_r)) & mask
        temp_r = (temp_r * temp_r) & mask
        n >>= 1
    if n:
        result = (result + mult) & mask
    return result


def abs_as_unsigned(a, bits=32):
    """Magnitude of a signed or unsigned value of the given width."""
    mask = width_mask(bits)
    assert -(1 << (bits - 1)) <= a <= mask, f"{a} does not fit {bits} bits"
    if a < 0:
        # -(a + 1) is representable even for the most negative value
        return (-(a + 1) + 1) & mask
    return a


def modulo(a, m):
    """a mod m in [0, m), for negative a and for a wider than m."""
    assert m > 0, "modulus must be positive"
    if a >= 0:
        return a % m
    bits = _signed_width(a)
    if bits is None:
        magnitude = -a
    else:
        magnitude = abs_as_unsigned(a, bits)
    abs_mod = magnitude % m
    if abs_mod == 0:
        return 0
    return m - abs_mod


def _signed_width(a):
    # smallest supported signed width holding a, None beyond 128 bits
    for bits in WIDTHS:
        if -(1 << (bits - 1)) <= a < (1 << (bits - 1)):
            return bits
    return None
