"""Addition, scalar multiplication and pairing check on the alt_bn128 curve."""

from __future__ import annotations

from ..precompile import PrecompileError, PrecompileErrorKind, PrecompileResult

FIELD_MODULUS = (
    21888242871839275222246405745257275088696311157297823662689037894645226208583
)
CURVE_ORDER = (
    21888242871839275222246405745257275088548364400416034343698204186575808495617
)

ADD_INPUT_LEN = 128
MUL_INPUT_LEN = 128
PAIR_ELEMENT_LEN = 192

ISTANBUL_ADD_COST = 150
BYZANTIUM_ADD_COST = 500
ISTANBUL_MUL_COST = 6_000
BYZANTIUM_MUL_COST = 40_000
ISTANBUL_PAIR_PER_POINT = 34_000
ISTANBUL_PAIR_BASE = 45_000
BYZANTIUM_PAIR_PER_POINT = 80_000
BYZANTIUM_PAIR_BASE = 100_000

_P = FIELD_MODULUS
_ATE_LOOP_COUNT = 29793968203157093288
_FINAL_EXPONENT = (_P**12 - 1) // CURVE_ORDER


class _Fq:
    """Element of the base prime field."""

    __slots__ = ("n",)

    def __init__(self, n: int) -> None:
        self.n = n % _P

    def __add__(self, other: "_Fq") -> "_Fq":
        return _Fq(self.n + other.n)

    def __sub__(self, other: "_Fq") -> "_Fq":
        return _Fq(self.n - other.n)

    def __neg__(self) -> "_Fq":
        return _Fq(-self.n)

    def __mul__(self, other: "_Fq | int") -> "_Fq":
        if isinstance(other, int):
            return _Fq(self.n * other)
        return _Fq(self.n * other.n)

    def __truediv__(self, other: "_Fq") -> "_Fq":
        return _Fq(self.n * pow(other.n, -1, _P))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Fq) and self.n == other.n

    def __hash__(self) -> int:
        return hash(self.n)

    def is_zero(self) -> bool:
        return self.n == 0


class _Fq2:
    """Element of the quadratic extension ``Fq[i] / (i^2 + 1)``."""

    __slots__ = ("c0", "c1")

    def __init__(self, c0: int, c1: int) -> None:
        self.c0 = c0 % _P
        self.c1 = c1 % _P

    def __add__(self, other: "_Fq2") -> "_Fq2":
        return _Fq2(self.c0 + other.c0, self.c1 + other.c1)

    def __sub__(self, other: "_Fq2") -> "_Fq2":
        return _Fq2(self.c0 - other.c0, self.c1 - other.c1)

    def __neg__(self) -> "_Fq2":
        return _Fq2(-self.c0, -self.c1)

    def __mul__(self, other: "_Fq2 | int") -> "_Fq2":
        if isinstance(other, int):
            return _Fq2(self.c0 * other, self.c1 * other)
        return _Fq2(
            self.c0 * other.c0 - self.c1 * other.c1,
            self.c0 * other.c1 + self.c1 * other.c0,
        )

    def __truediv__(self, other: "_Fq2") -> "_Fq2":
        return self * other.inverse()

    def __pow__(self, exponent: int) -> "_Fq2":
        result = _Fq2(1, 0)
        for bit in bin(exponent)[2:]:
            result = result * result
            if bit == "1":
                result = result * self
        return result

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Fq2) and (self.c0, self.c1) == (other.c0, other.c1)

    def __hash__(self) -> int:
        return hash((self.c0, self.c1))

    def inverse(self) -> "_Fq2":
        inv = pow(self.c0 * self.c0 + self.c1 * self.c1, -1, _P)
        return _Fq2(self.c0 * inv, -self.c1 * inv)

    def conjugate(self) -> "_Fq2":
        return _Fq2(self.c0, -self.c1)

    def is_zero(self) -> bool:
        return self.c0 == 0 and self.c1 == 0


_B1 = _Fq(3)
_XI = _Fq2(9, 1)
_B2 = _Fq2(3, 0) / _XI
_GAMMA_X = _XI ** ((_P - 1) // 3)
_GAMMA_Y = _XI ** ((_P - 1) // 2)

# Points are affine (x, y) tuples of field elements; None is the point at infinity.


def _double(pt):
    if pt is None:
        return None
    x, y = pt
    if y.is_zero():
        return None
    m = (x * x * 3) / (y * 2)
    nx = m * m - x * 2
    return nx, m * (x - nx) - y


def _add(p1, p2):
    if p1 is None:
        return p2
    if p2 is None:
        return p1
    (x1, y1), (x2, y2) = p1, p2
    if x1 == x2:
        return _double(p1) if y1 == y2 else None
    m = (y2 - y1) / (x2 - x1)
    nx = m * m - x1 - x2
    return nx, m * (x1 - nx) - y1


def _multiply(pt, scalar: int):
    result = None
    while scalar:
        if scalar & 1:
            result = _add(result, pt)
        pt = _double(pt)
        scalar >>= 1
    return result


def _on_curve(pt, b) -> bool:
    x, y = pt
    return y * y == x * x * x + b


# Fq12 elements are 12-tuples of ints: coefficients of w^0..w^11 with w^12 = 18 w^6 - 82.
_FQ12_ONE = (1,) + (0,) * 11


def _fq12_mul(a: tuple, b: tuple) -> tuple:
    prod = [0] * 23
    for i, ai in enumerate(a):
        if ai:
            for j, bj in enumerate(b):
                prod[i + j] += ai * bj
    for k in range(22, 11, -1):
        top = prod[k]
        if top:
            prod[k - 6] += 18 * top
            prod[k - 12] -= 82 * top
    return tuple(c % _P for c in prod[:12])


def _fq12_pow(a: tuple, exponent: int) -> tuple:
    result = _FQ12_ONE
    for bit in bin(exponent)[2:]:
        result = _fq12_mul(result, result)
        if bit == "1":
            result = _fq12_mul(result, a)
    return result


def _line(r, q, xt: int, yt: int) -> tuple:
    """Line through twisted points ``r`` and ``q`` evaluated at the G1 point."""
    (x1, y1), (x2, y2) = r, q
    coeffs = [0] * 12
    if x1 == x2 and not y1 == y2:
        coeffs[0] = xt
        coeffs[2] = -(x1.c0 - 9 * x1.c1)
        coeffs[8] = -x1.c1
    else:
        if x1 == x2:
            slope = (x1 * x1 * 3) / (y1 * 2)
        else:
            slope = (y2 - y1) / (x2 - x1)
        a = slope * xt
        b = y1 - slope * x1
        coeffs[0] = -yt
        coeffs[1] = a.c0 - 9 * a.c1
        coeffs[7] = a.c1
        coeffs[3] = b.c0 - 9 * b.c1
        coeffs[9] = b.c1
    return tuple(c % _P for c in coeffs)


def _frobenius(pt):
    x, y = pt
    return x.conjugate() * _GAMMA_X, y.conjugate() * _GAMMA_Y


def _miller_loop(q, p) -> tuple:
    xt, yt = p[0].n, p[1].n
    r = q
    f = _FQ12_ONE
    for bit in bin(_ATE_LOOP_COUNT)[3:]:
        f = _fq12_mul(_fq12_mul(f, f), _line(r, r, xt, yt))
        r = _double(r)
        if bit == "1":
            f = _fq12_mul(f, _line(r, q, xt, yt))
            r = _add(r, q)
    q1 = _frobenius(q)
    x2, y2 = _frobenius(q1)
    neg_q2 = (x2, -y2)
    f = _fq12_mul(f, _line(r, q1, xt, yt))
    r = _add(r, q1)
    return _fq12_mul(f, _line(r, neg_q2, xt, yt))


def _read_fq(data: bytes) -> int:
    value = int.from_bytes(data, "big")
    if value >= _P:
        raise PrecompileError(PrecompileErrorKind.BN128_FIELD_POINT_NOT_A_MEMBER)
    return value


def _read_point(data: bytes, pos: int):
    """Read a G1 point (x, y) at ``pos``; all zeros is the point at infinity."""
    px = _read_fq(data[pos:pos + 32])
    py = _read_fq(data[pos + 32:pos + 64])
    if px == 0 and py == 0:
        return None
    point = (_Fq(px), _Fq(py))
    if not _on_curve(point, _B1):
        raise PrecompileError(PrecompileErrorKind.BN128_AFFINE_G_FAILED_TO_CREATE)
    return point


def _encode_g1(point) -> bytes:
    if point is None:
        return bytes(64)
    x, y = point
    return x.n.to_bytes(32, "big") + y.n.to_bytes(32, "big")


def _pad(data: bytes, length: int) -> bytes:
    return bytes(data[:length]).ljust(length, b"\x00")


def run_add(input: bytes) -> bytes:
    """Sum of two G1 points, as 64 bytes (zero for the point at infinity)."""
    data = _pad(input, ADD_INPUT_LEN)
    p1 = _read_point(data, 0)
    p2 = _read_point(data, 64)
    return _encode_g1(_add(p1, p2))


def run_mul(input: bytes) -> bytes:
    """A G1 point multiplied by a scalar, as 64 bytes."""
    data = _pad(input, MUL_INPUT_LEN)
    point = _read_point(data, 0)
    scalar = int.from_bytes(data[64:96], "big") % CURVE_ORDER
    return _encode_g1(_multiply(point, scalar))


def _read_pair_element(element: bytes):
    ax, ay, bay, bax, bby, bbx = (
        _read_fq(element[offset:offset + 32]) for offset in range(0, 192, 32)
    )
    if ax == 0 and ay == 0:
        a = None
    else:
        a = (_Fq(ax), _Fq(ay))
        if not _on_curve(a, _B1):
            raise PrecompileError(PrecompileErrorKind.BN128_AFFINE_G_FAILED_TO_CREATE)
    bx = _Fq2(bax, bay)
    by = _Fq2(bbx, bby)
    if bx.is_zero() and by.is_zero():
        b = None
    else:
        b = (bx, by)
        if not _on_curve(b, _B2) or _multiply(b, CURVE_ORDER) is not None:
            raise PrecompileError(PrecompileErrorKind.BN128_AFFINE_G_FAILED_TO_CREATE)
    return a, b


def run_pair(
    input: bytes, pair_per_point_cost: int, pair_base_cost: int, gas_limit: int
) -> PrecompileResult:
    """Check that the product of pairings of the given points is one."""
    gas_used = pair_per_point_cost * len(input) // PAIR_ELEMENT_LEN + pair_base_cost
    if gas_used > gas_limit:
        raise PrecompileError(PrecompileErrorKind.OUT_OF_GAS)
    if len(input) % PAIR_ELEMENT_LEN != 0:
        raise PrecompileError(PrecompileErrorKind.BN128_PAIR_LENGTH)

    data = bytes(input)
    pairs = [
        _read_pair_element(data[start:start + PAIR_ELEMENT_LEN])
        for start in range(0, len(data), PAIR_ELEMENT_LEN)
    ]
    product = _FQ12_ONE
    for a, b in pairs:
        if a is not None and b is not None:
            product = _fq12_mul(product, _miller_loop(b, a))
    success = product == _FQ12_ONE or _fq12_pow(product, _FINAL_EXPONENT) == _FQ12_ONE
    return gas_used, int(success).to_bytes(32, "big")


def _fixed_cost(cost: int, gas_limit: int) -> None:
    if cost > gas_limit:
        raise PrecompileError(PrecompileErrorKind.OUT_OF_GAS)


def add_istanbul(input: bytes, gas_limit: int) -> PrecompileResult:
    """G1 addition with Istanbul pricing."""
    _fixed_cost(ISTANBUL_ADD_COST, gas_limit)
    return ISTANBUL_ADD_COST, run_add(input)


def add_byzantium(input: bytes, gas_limit: int) -> PrecompileResult:
    """G1 addition with Byzantium pricing."""
    _fixed_cost(BYZANTIUM_ADD_COST, gas_limit)
    return BYZANTIUM_ADD_COST, run_add(input)


def mul_istanbul(input: bytes, gas_limit: int) -> PrecompileResult:
    """G1 scalar multiplication with Istanbul pricing."""
    _fixed_cost(ISTANBUL_MUL_COST, gas_limit)
    return ISTANBUL_MUL_COST, run_mul(input)


def mul_byzantium(input: bytes, gas_limit: int) -> PrecompileResult:
    """G1 scalar multiplication with Byzantium pricing."""
    _fixed_cost(BYZANTIUM_MUL_COST, gas_limit)
    return BYZANTIUM_MUL_COST, run_mul(input)


def pair_istanbul(input: bytes, gas_limit: int) -> PrecompileResult:
    """Pairing check with Istanbul pricing."""
    return run_pair(input, ISTANBUL_PAIR_PER_POINT, ISTANBUL_PAIR_BASE, gas_limit)


def pair_byzantium(input: bytes, gas_limit: int) -> PrecompileResult:
    """Pairing check with Byzantium pricing."""
    return run_pair(input, BYZANTIUM_PAIR_PER_POINT, BYZANTIUM_PAIR_BASE, gas_limit)