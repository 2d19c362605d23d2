"""The ECRECOVER precompile: signer address recovery on secp256k1."""

from __future__ import annotations

from ..bits import B256
from ..precompile import PrecompileError, PrecompileErrorKind, PrecompileResult
from ..utilities import keccak256

ECRECOVER_BASE = 3_000

P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

_G = (GX, GY)


def _add(p1, p2):
    if p1 is None:
        return p2
    if p2 is None:
        return p1
    (x1, y1), (x2, y2) = p1, p2
    if x1 == x2:
        if (y1 + y2) % P == 0:
            return None
        slope = 3 * x1 * x1 * pow(2 * y1, -1, P) % P
    else:
        slope = (y2 - y1) * pow(x2 - x1, -1, P) % P
    x3 = (slope * slope - x1 - x2) % P
    return x3, (slope * (x1 - x3) - y1) % P


def _multiply(point, scalar: int):
    result = None
    while scalar:
        if scalar & 1:
            result = _add(result, point)
        point = _add(point, point)
        scalar >>= 1
    return result


def ecrecover(sig: bytes, msg: bytes) -> B256:
    """Recover the signer of ``msg`` from a 65-byte ``r | s | recovery id`` signature.

    Returns the 20-byte address left-padded with zeros to 32 bytes; raises
    ValueError when no public key can be recovered.
    """
    sig = bytes(sig)
    msg = bytes(msg)
    if len(sig) != 65:
        raise ValueError(f"signature must be 65 bytes, got {len(sig)}")
    if len(msg) != 32:
        raise ValueError(f"message hash must be 32 bytes, got {len(msg)}")
    r = int.from_bytes(sig[:32], "big")
    s = int.from_bytes(sig[32:64], "big")
    recovery_id = sig[64]
    if recovery_id > 3:
        raise ValueError(f"invalid recovery id: {recovery_id}")
    if not (0 < r < N and 0 < s < N):
        raise ValueError("signature scalar out of range")

    x = r + N if recovery_id >= 2 else r
    if x >= P:
        raise ValueError("signature r does not name a curve point")
    y_squared = (pow(x, 3, P) + 7) % P
    y = pow(y_squared, (P + 1) // 4, P)
    if y * y % P != y_squared:
        raise ValueError("signature r does not name a curve point")
    if (y & 1) != (recovery_id & 1):
        y = P - y

    e = int.from_bytes(msg, "big") % N
    r_inv = pow(r, -1, N)
    u1 = -e * r_inv % N
    u2 = s * r_inv % N
    public = _add(_multiply(_G, u1), _multiply((x, y), u2))
    if public is None:
        raise ValueError("recovered public key is the point at infinity")

    encoded = public[0].to_bytes(32, "big") + public[1].to_bytes(32, "big")
    return B256(bytes(12) + keccak256(encoded)[12:])


def ec_recover_run(input: bytes, gas_limit: int) -> PrecompileResult:
    """Recover the signer from ``hash | v | r | s``; empty output when invalid."""
    if ECRECOVER_BASE > gas_limit:
        raise PrecompileError(PrecompileErrorKind.OUT_OF_GAS)
    data = bytes(input[:128]).ljust(128, b"\x00")

    v = data[63]
    if data[32:63] != bytes(31) or v not in (27, 28):
        return ECRECOVER_BASE, b""

    msg = data[:32]
    sig = data[64:128] + bytes([v - 27])
    try:
        out = bytes(ecrecover(sig, msg))
    except ValueError:
        out = b""
    return ECRECOVER_BASE, out