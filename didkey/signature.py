from typing import Tuple

from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature, encode_dss_signature


def field_byte_length(bit_size: int) -> int:
	return (bit_size + 7) // 8


FIELD_BYTE_LENGTH = field_byte_length(ec.SECP256R1.key_size)

# raw r||s, the same layout JWS ES256 uses. never DER.
SIGNATURE_LENGTH = 2 * FIELD_BYTE_LENGTH


def encode(r: int, s: int, size: int=FIELD_BYTE_LENGTH) -> bytes:
	return r.to_bytes(size, "big") + s.to_bytes(size, "big")


def decode(sig: bytes, size: int=FIELD_BYTE_LENGTH) -> Tuple[int, int]:
	if len(sig) != 2 * size:
		raise ValueError(f"signature must be {2 * size} bytes, got {len(sig)}")
	return int.from_bytes(sig[:size], "big"), int.from_bytes(sig[size:], "big")


def from_der(der: bytes, size: int=FIELD_BYTE_LENGTH) -> bytes:
	r, s = decode_dss_signature(der)
	return encode(r, s, size)


def to_der(sig: bytes, size: int=FIELD_BYTE_LENGTH) -> bytes:
	r, s = decode(sig, size)
	return encode_dss_signature(r, s)
