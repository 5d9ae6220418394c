# https://github.com/multiformats/unsigned-varint
# https://github.com/multiformats/multicodec/blob/master/table.csv

from typing import Tuple

from .errors import MalformedEnvelopeError, UnsupportedKeyTypeError

P256_PUB = 0x1200  # p256-pub, varint(0x1200) == b"\x80\x24"

SUPPORTED_CODES = frozenset({P256_PUB})

# unsigned-varint caps encodings at 9 bytes (63 bits of payload)
MAX_VARINT_LENGTH = 9


def encode_uvarint(n: int) -> bytes:
	if n < 0:
		raise ValueError("uvarint must be non-negative")
	out = bytearray()
	while True:
		byte = n & 0x7f
		n >>= 7
		if n:
			out.append(byte | 0x80)
		else:
			out.append(byte)
			return bytes(out)


def decode_uvarint(data: bytes) -> Tuple[int, int]:
	"""Returns (value, number of bytes consumed)."""
	value = 0
	for i, byte in enumerate(data[:MAX_VARINT_LENGTH]):
		value |= (byte & 0x7f) << (7 * i)
		if byte & 0x80 == 0:
			if byte == 0 and i > 0:
				raise MalformedEnvelopeError("varint is not minimally encoded")
			return value, i + 1
	if len(data) >= MAX_VARINT_LENGTH:
		raise MalformedEnvelopeError("varint too long")
	raise MalformedEnvelopeError("varint truncated")


def encode(code: int, payload: bytes) -> bytes:
	return encode_uvarint(code) + payload


def decode(data: bytes) -> Tuple[int, bytes]:
	code, offset = decode_uvarint(data)
	if code not in SUPPORTED_CODES:
		raise UnsupportedKeyTypeError(code)
	return code, bytes(data[offset:])
