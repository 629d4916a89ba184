# rngjump/bitcolumnmatrix.py
# Linear transforms of a W-bit word over GF(2).
# A matrix is stored as W integer columns: column i is the image of (1 << i).
# Applying it to a word XORs together the columns selected by the word's bits,
# so shifts, masks and xor-shift steps of a generator all become matrices and
# n steps become one matrix power.


class BitColumnMatrix:
    width = None

    def __init__(self, columns):
        columns = tuple(columns)
        assert self.width is not None, "use a fixed-width subclass"
        assert len(columns) == self.width, \
            f"expected {self.width} columns, got {len(columns)}"
        mask = self.mask()
        self._columns = tuple(c & mask for c in columns)

    @classmethod
    def mask(cls):
        return (1 << cls.width) - 1

    @classmethod
    def zero(cls):
        return cls([0] * cls.width)

    @classmethod
    def identity(cls):
        return cls([1 << i for i in range(cls.width)])

    one = identity

    @classmethod
    def shift(cls, shift_by):
        """Matrix of x << shift_by (shift_by >= 0) or x >> -shift_by."""
        mask = cls.mask()
        if shift_by >= 0:
            return cls([((1 << i) << shift_by) & mask for i in range(cls.width)])
        return cls([(1 << i) >> -shift_by for i in range(cls.width)])

    @property
    def columns(self):
        return self._columns

    def dot_vec(self, v):
        result = 0
        i = 0
        v &= self.mask()
        while v:
            if v & 1:
                result ^= self._columns[i]
            v >>= 1
            i += 1
        return result

    apply = dot_vec

    def dot(self, other):
        self._check_width(other)
        return type(self)([self.dot_vec(c) for c in other._columns])

    def __mul__(self, other):
        if not isinstance(other, BitColumnMatrix):
            return NotImplemented
        return self.dot(other)

    def __add__(self, other):
        if not isinstance(other, BitColumnMatrix):
            return NotImplemented
        self._check_width(other)
        return type(self)([a ^ b for a, b in zip(self._columns, other._columns)])

    def __and__(self, mask):
        return type(self)([c & mask for c in self._columns])

    def __lshift__(self, shift_by):
        return type(self)([c << shift_by for c in self._columns])

    def __rshift__(self, shift_by):
        return type(self)([c >> shift_by for c in self._columns])

    def pow(self, n):
        """Raise to a non-negative integer power by repeated squaring."""
        assert n >= 0, "exponent must be non-negative"
        result = list(type(self).identity()._columns)
        temp_mult = list(self._columns)
        while True:
            if n & 1:
                result = _compose_columns(result, temp_mult)
            n >>= 1
            if n == 0:
                break
            temp_mult = _compose_columns(temp_mult, temp_mult)
        return type(self)(result)

    def __pow__(self, n):
        return self.pow(n)

    def __eq__(self, other):
        if not isinstance(other, BitColumnMatrix):
            return NotImplemented
        return self.width == other.width and self._columns == other._columns

    def __hash__(self):
        return hash((self.width, self._columns))

    def __repr__(self):
        digits = (self.width + 3) // 4
        cols = ', '.join(format(c, f'#0{digits + 2}x') for c in self._columns)
        return f"{type(self).__name__}([{cols}])"

    def _check_width(self, other):
        assert self.width == other.width, \
            f"width mismatch: {self.width} vs {other.width}"


def _compose_columns(left, right):
    # columns of left * right, both given as plain column lists
    out = []
    for v in right:
        acc = 0
        i = 0
        while v:
            if v & 1:
                acc ^= left[i]
            v >>= 1
            i += 1
        out.append(acc)
    return out


class BitColumnMatrix8(BitColumnMatrix):
    width = 8


class BitColumnMatrix16(BitColumnMatrix):
    width = 16


class BitColumnMatrix32(BitColumnMatrix):
    width = 32


class BitColumnMatrix64(BitColumnMatrix):
    width = 64


class BitColumnMatrix128(BitColumnMatrix):
    width = 128
