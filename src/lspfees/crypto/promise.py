"""Promise codec: canonical hashing, signing and verification of fee params.

A promise is a 65-byte compact recoverable secp256k1 signature over
``sha256`` of the fee params encoded as a fixed-order JSON array. The first
byte is the recovery header ``27 + 4 + recid`` (compressed public key),
followed by ``r`` and ``s``.
"""

from __future__ import annotations

import binascii
import hashlib
import json
import logging

import coincurve
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from ..domain.entities import OpeningFeeParams
from ..domain.errors import (
    InvalidPromiseError,
    PromiseEncodingError,
    PromiseSigningError,
)

logger = logging.getLogger(__name__)

COMPACT_SIGNATURE_SIZE = 65
COMPACT_HEADER_BASE = 27
COMPACT_HEADER_COMPRESSED = 4

# Characters escaped inside JSON strings so the canonical bytes stay stable
# across encoders that HTML-escape by default.
_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _canonical_json(items: list) -> bytes:
    blob = json.dumps(items, separators=(",", ":"), ensure_ascii=False)
    for char, escape in _JSON_ESCAPES.items():
        blob = blob.replace(char, escape)
    return blob.encode("utf-8")


def params_hash(params: OpeningFeeParams) -> bytes:
    """Return the sha256 digest of the signed fields in their fixed order.

    The promise itself is not part of the hash.
    """
    items = [
        params.min_fee_msat,
        params.proportional,
        params.valid_until,
        params.min_lifetime,
        params.max_client_to_self_delay,
    ]
    try:
        blob = _canonical_json(items)
    except (TypeError, ValueError) as e:
        logger.error("params_hash error: %s", e)
        raise PromiseEncodingError("Failed to encode opening fee params") from e
    return hashlib.sha256(blob).digest()


def create_promise(
    private_key: coincurve.PrivateKey, params: OpeningFeeParams
) -> str:
    """Sign the params hash and return the hex-encoded compact signature."""
    digest = params_hash(params)
    try:
        signature = private_key.sign_recoverable(digest, hasher=None)
    except (AttributeError, TypeError, ValueError) as e:
        logger.error("create_promise: signing failed: %s", type(e).__name__)
        raise PromiseSigningError("Failed to sign opening fee params") from e

    r_s, recid = signature[:64], signature[64]
    header = COMPACT_HEADER_BASE + COMPACT_HEADER_COMPRESSED + recid
    return (bytes([header]) + r_s).hex()


def _recover_public_key(signature: bytes, digest: bytes) -> coincurve.PublicKey:
    if len(signature) != COMPACT_SIGNATURE_SIZE:
        raise ValueError(f"Invalid compact signature size {len(signature)}")
    header = signature[0] - COMPACT_HEADER_BASE
    if header < 0 or header > 7:
        raise ValueError(f"Invalid compact signature header {signature[0]}")
    recid = header & 3
    recoverable = signature[1:] + bytes([recid])
    return coincurve.PublicKey.from_signature_and_message(
        recoverable, digest, hasher=None
    )


def verify_promise(public_key: coincurve.PublicKey, params: OpeningFeeParams) -> None:
    """Check that ``params.promise`` was produced by ``public_key``'s owner.

    Raises InvalidPromiseError for every failure; the cause is only logged.
    """
    try:
        digest = params_hash(params)
    except PromiseEncodingError as e:
        raise InvalidPromiseError("invalid promise") from e

    try:
        signature = binascii.unhexlify(params.promise)
    except ValueError as e:
        logger.warning("verify_promise: hex decode error: %s", e)
        raise InvalidPromiseError("invalid promise") from e

    try:
        recovered = _recover_public_key(signature, digest)
    except (TypeError, ValueError) as e:
        logger.warning("verify_promise: recovery of %s failed: %s", signature.hex(), e)
        raise InvalidPromiseError("invalid promise") from e

    if recovered.format(compressed=True) != public_key.format(compressed=True):
        logger.warning("verify_promise: not signed by us")
        raise InvalidPromiseError("invalid promise")


def load_private_key(value: str) -> coincurve.PrivateKey:
    """Load a secp256k1 private key from PEM (SEC1 or PKCS8) or 32-byte hex."""
    value = value.strip()
    if value.startswith("-----BEGIN"):
        key = serialization.load_pem_private_key(value.encode(), password=None)
        if not isinstance(key, ec.EllipticCurvePrivateKey) or not isinstance(
            key.curve, ec.SECP256K1
        ):
            raise ValueError("Private key must be a secp256k1 EC key")
        secret = key.private_numbers().private_value.to_bytes(32, "big")
        return coincurve.PrivateKey(secret)

    secret = bytes.fromhex(value)
    if len(secret) != 32:
        raise ValueError("Hex private key must be 32 bytes")
    return coincurve.PrivateKey(secret)


def load_public_key(value: str) -> coincurve.PublicKey:
    """Load a public key from its hex SEC encoding (33 or 65 bytes)."""
    return coincurve.PublicKey(bytes.fromhex(value))


def public_key_hex(key: coincurve.PublicKey) -> str:
    """Compressed SEC encoding of ``key`` as hex."""
    return key.format(compressed=True).hex()
