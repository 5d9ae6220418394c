# https://www.secg.org/sec2-v2.pdf
# Section 2.4.2 - Recommended Parameters secp256r1 (aka NIST P-256)
# https://www.secg.org/sec1-v2.pdf
# Section 2.3.3 - Elliptic-Curve-Point-to-Octet-String Conversion

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from .errors import InvalidPointError

# the modulus of the prime field
p = 0xFFFFFFFF_00000001_00000000_00000000_00000000_FFFFFFFF_FFFFFFFF_FFFFFFFF

# curve parameters
a = 0xFFFFFFFF_00000001_00000000_00000000_00000000_FFFFFFFF_FFFFFFFF_FFFFFFFC
b = 0x5AC635D8_AA3A93E7_B3EBBD55_769886BC_651D06B0_CC53B0F6_3BCE3C3E_27D2604B

# the base point
Gx = 0x6B17D1F2_E12C4247_F8BCE6E5_63A440F2_77037D81_2DEB33A0_F4A13945_D898C296
Gy = 0x4FE342E2_FE1A7F9B_8EE7EB4A_7C0F9E16_2BCE3357_6B315ECE_CBB64068_37BF51F5

# the order of the base point
n = 0xFFFFFFFF_00000000_FFFFFFFF_FFFFFFFF_BCE6FAAD_A7179E84_F3B9CAC2_FC632551
h = 1  # cofactor

BYTE_LENGTH = (p.bit_length() + 7) // 8
COMPRESSED_LENGTH = 1 + BYTE_LENGTH


def encode_compressed(pubkey: ec.EllipticCurvePublicKey) -> bytes:
	return pubkey.public_bytes(
		serialization.Encoding.X962, serialization.PublicFormat.CompressedPoint
	)


def decode_compressed(data: bytes) -> ec.EllipticCurvePublicKey:
	if len(data) != COMPRESSED_LENGTH:
		raise InvalidPointError(f"compressed point must be {COMPRESSED_LENGTH} bytes, got {len(data)}")
	prefix = data[0]
	if prefix not in (0x02, 0x03):
		raise InvalidPointError(f"invalid compressed point prefix 0x{prefix:02x}")
	try:
		return ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256R1(), bytes(data))
	except ValueError as e:
		raise InvalidPointError(f"point is not on curve: {e}") from e
