"""did:key identifier grammar.

    did:key:z<base58btc(varint(0x1200) || compressed P-256 point)>

https://w3c-ccg.github.io/did-method-key/
"""

import logging
from typing import Tuple

import base58
from cryptography.hazmat.primitives.asymmetric import ec

from . import multicodec, secp256r1
from .errors import (
	EmptyIdentifierError,
	InvalidEncodingError,
	InvalidFormatError,
	InvalidKeyLengthError,
	InvalidMethodError,
	InvalidSchemeError,
	MissingPrefixError,
)

logger = logging.getLogger(__name__)

SCHEME = "did"
METHOD = "key"
BASE58BTC_PREFIX = "z"  # multibase code for base58btc
DID_PREFIX = f"{SCHEME}:{METHOD}:{BASE58BTC_PREFIX}"

# b58decode strips trailing whitespace, so the alphabet is checked up front
BASE58_CHARS = frozenset(base58.BITCOIN_ALPHABET.decode())


def split(did: str) -> Tuple[str, str]:
	"""Checks the did:key:<id> structure, returning (method, method-specific id)."""
	parts = did.split(":")
	if len(parts) != 3:
		raise InvalidFormatError(f"invalid did format; expected 3 segments, got {len(parts)}")
	scheme, method, msid = parts
	if scheme != SCHEME:
		raise InvalidSchemeError(f"invalid did scheme {scheme!r}; scheme must be {SCHEME}")
	if method != METHOD:
		raise InvalidMethodError(f"invalid did method {method!r}; did method must be {METHOD}")
	if not msid:
		raise EmptyIdentifierError("invalid did key; must not be empty")
	return method, msid


def decode_public_key(did: str) -> ec.EllipticCurvePublicKey:
	_, msid = split(did)
	if not msid.startswith(BASE58BTC_PREFIX):
		raise MissingPrefixError(f"invalid did key; must start with {BASE58BTC_PREFIX}")
	encoded = msid[1:]
	bad = set(encoded) - BASE58_CHARS
	if bad:
		raise InvalidEncodingError(f"invalid base58btc characters: {''.join(sorted(bad))!r}")
	try:
		envelope = base58.b58decode(encoded)
	except ValueError as e:
		raise InvalidEncodingError(f"invalid base58btc encoding: {e}") from e

	_, key_bytes = multicodec.decode(envelope)
	if len(key_bytes) != secp256r1.COMPRESSED_LENGTH:
		raise InvalidKeyLengthError(
			f"invalid did key; decoded key must be {secp256r1.COMPRESSED_LENGTH} bytes, got {len(key_bytes)}"
		)
	pubkey = secp256r1.decode_compressed(key_bytes)
	logger.debug("decoded %s", did)
	return pubkey


def build(pubkey: ec.EllipticCurvePublicKey) -> str:
	envelope = multicodec.encode(multicodec.P256_PUB, secp256r1.encode_compressed(pubkey))
	return DID_PREFIX + base58.b58encode(envelope).decode()
