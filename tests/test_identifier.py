import base58
import pytest
from cryptography.hazmat.primitives.asymmetric import ec

from didkey import PrivateDIDKey, identifier, multicodec, parse, secp256r1
from didkey.errors import (
	EmptyIdentifierError,
	InvalidDIDError,
	InvalidEncodingError,
	InvalidFormatError,
	InvalidKeyLengthError,
	InvalidMethodError,
	InvalidPointError,
	InvalidSchemeError,
	MalformedEnvelopeError,
	MissingPrefixError,
	UnsupportedKeyTypeError,
)

# from the did:key method test vectors
P256_DID = "did:key:zDnaerDaTF5BXEavCrfRZEk316dpbLsfPDZ3WJ5hRTPFU2169"


def _base_point() -> ec.EllipticCurvePublicKey:
	return ec.EllipticCurvePublicNumbers(secp256r1.Gx, secp256r1.Gy, ec.SECP256R1()).public_key()


def _did_for_envelope(envelope: bytes) -> str:
	return "did:key:z" + base58.b58encode(envelope).decode()


def test_known_vector():
	key = parse(P256_DID)
	assert key.did().startswith("did:key:zDn")
	assert key.did() == P256_DID


def test_build_base_point():
	did = identifier.build(_base_point())
	assert did.startswith("did:key:zDn")
	numbers = identifier.decode_public_key(did).public_numbers()
	assert (numbers.x, numbers.y) == (secp256r1.Gx, secp256r1.Gy)


def test_split():
	assert identifier.split("did:key:zABC") == ("key", "zABC")


@pytest.mark.parametrize("did,error", [
	("notadid:key:zABC", InvalidSchemeError),
	("did:notkey:zABC", InvalidMethodError),
	("did:key:", EmptyIdentifierError),
	("did:key:ABC", MissingPrefixError),
	("did:key:z!!!invalid!!!", InvalidEncodingError),
	(P256_DID + "\n", InvalidEncodingError),
	(P256_DID + " ", InvalidEncodingError),
	("did:key:z0OIl", InvalidEncodingError),
	("did:key", InvalidFormatError),
	("did:key:zABC:extra", InvalidFormatError),
	("", InvalidFormatError),
	("did:key:z", MalformedEnvelopeError),
])
def test_malformed_identifiers(did, error):
	with pytest.raises(error):
		parse(did)


def test_errors_are_distinct():
	errors = [
		InvalidFormatError, InvalidSchemeError, InvalidMethodError, EmptyIdentifierError,
		MissingPrefixError, InvalidEncodingError, MalformedEnvelopeError,
		UnsupportedKeyTypeError, InvalidPointError, InvalidKeyLengthError,
	]
	assert len(set(errors)) == len(errors)
	for error in errors:
		assert issubclass(error, InvalidDIDError)
		assert issubclass(error, ValueError)
		others = [e for e in errors if e is not error]
		assert not any(issubclass(error, other) for other in others)


def test_unsupported_key_type():
	# a well-formed ed25519 did:key
	did = _did_for_envelope(multicodec.encode(0xed, bytes(range(32))))
	with pytest.raises(UnsupportedKeyTypeError):
		parse(did)


@pytest.mark.parametrize("length", [32, 34])
def test_invalid_key_length(length):
	compressed = secp256r1.encode_compressed(_base_point())
	payload = (compressed + b"\x00")[:length]
	did = _did_for_envelope(multicodec.encode(multicodec.P256_PUB, payload))
	with pytest.raises(InvalidKeyLengthError):
		parse(did)


def test_invalid_point_prefix():
	payload = b"\x04" + secp256r1.Gx.to_bytes(32, "big")
	did = _did_for_envelope(multicodec.encode(multicodec.P256_PUB, payload))
	with pytest.raises(InvalidPointError):
		parse(did)


@pytest.mark.parametrize("suffix", ["\n", " ", "\t", "\r\n"])
def test_trailing_whitespace_rejected(suffix):
	did = PrivateDIDKey.generate().did()
	with pytest.raises(InvalidEncodingError):
		parse(did + suffix)
