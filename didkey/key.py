import logging
from dataclasses import dataclass, field
from typing import Tuple

from cryptography.exceptions import InternalError, InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed

from . import identifier, secp256r1, signature as sigcodec
from .errors import InvalidDIDError, InvalidPointError, NoPrivateKeyError, SigningError

logger = logging.getLogger(__name__)

# callers hash; we only ever see the 32-byte digest
ECDSA_PREHASHED_SHA256 = ec.ECDSA(Prehashed(hashes.SHA256()))
DIGEST_LENGTH = hashes.SHA256.digest_size


@dataclass(frozen=True)
class DIDKey:
	"""A P-256 public point, always on the curve.

	Abstract: a key is either a PublicDIDKey or a PrivateDIDKey.
	"""
	x: int
	y: int
	_public_key: ec.EllipticCurvePublicKey = field(init=False, repr=False, compare=False)

	def __post_init__(self):
		if type(self) is DIDKey:
			raise TypeError("DIDKey is abstract; use PublicDIDKey or PrivateDIDKey")
		try:
			pubkey = ec.EllipticCurvePublicNumbers(self.x, self.y, ec.SECP256R1()).public_key()
		except ValueError as e:
			raise InvalidPointError("point is not on curve") from e
		object.__setattr__(self, "_public_key", pubkey)

	@property
	def point(self) -> Tuple[int, int]:
		return self.x, self.y

	def public_key(self) -> ec.EllipticCurvePublicKey:
		return self._public_key

	def did(self) -> str:
		return identifier.build(self._public_key)

	def __str__(self):
		return self.did()

	def sign(self, digest: bytes) -> bytes:
		raise NoPrivateKeyError("failed to sign; private key not found")

	def verify(self, digest: bytes, signature: bytes) -> bool:
		# never raises: any malformed input is just an invalid signature
		try:
			if not isinstance(self._public_key.curve, ec.SECP256R1):
				return False
			if len(digest) != DIGEST_LENGTH or len(signature) != sigcodec.SIGNATURE_LENGTH:
				return False
			self._public_key.verify(sigcodec.to_der(bytes(signature)), bytes(digest), ECDSA_PREHASHED_SHA256)
		except (InvalidSignature, ValueError, TypeError):
			return False
		return True


@dataclass(frozen=True)
class PublicDIDKey(DIDKey):
	@classmethod
	def from_did(cls, did: str) -> "PublicDIDKey":
		return parse(did)

	@classmethod
	def from_public_key(cls, pubkey: ec.EllipticCurvePublicKey) -> "PublicDIDKey":
		if not isinstance(pubkey.curve, ec.SECP256R1):
			raise ValueError(f"only P-256 keys are supported, got {pubkey.curve.name}")
		numbers = pubkey.public_numbers()
		return cls(numbers.x, numbers.y)


@dataclass(frozen=True)
class PrivateDIDKey(DIDKey):
	"""A P-256 key pair; (x, y) is always d*G."""
	d: int = field(repr=False)
	_private_key: ec.EllipticCurvePrivateKey = field(init=False, repr=False, compare=False)

	def __post_init__(self):
		super().__post_init__()
		privkey = ec.derive_private_key(self.d, ec.SECP256R1())
		numbers = privkey.public_key().public_numbers()
		if (numbers.x, numbers.y) != (self.x, self.y):
			raise ValueError("public point does not match private scalar")
		object.__setattr__(self, "_private_key", privkey)

	@classmethod
	def from_private_key(cls, privkey: ec.EllipticCurvePrivateKey) -> "PrivateDIDKey":
		if not isinstance(privkey.curve, ec.SECP256R1):
			raise ValueError(f"only P-256 keys are supported, got {privkey.curve.name}")
		numbers = privkey.private_numbers()
		return cls(numbers.public_numbers.x, numbers.public_numbers.y, numbers.private_value)

	@classmethod
	def from_private_scalar(cls, d: bytes) -> "PrivateDIDKey":
		# NOTE: d is not range checked against the group order here; a zero or
		# out-of-range scalar fails however the curve provider fails on it.
		privkey = ec.derive_private_key(int.from_bytes(d, "big"), ec.SECP256R1())
		return cls.from_private_key(privkey)

	@classmethod
	def generate(cls) -> "PrivateDIDKey":
		return cls.from_private_key(ec.generate_private_key(ec.SECP256R1()))

	def private_key(self) -> ec.EllipticCurvePrivateKey:
		return self._private_key

	def private_bytes(self) -> bytes:
		return self.d.to_bytes(secp256r1.BYTE_LENGTH, "big")

	def public_only(self) -> PublicDIDKey:
		return PublicDIDKey(self.x, self.y)

	def sign(self, digest: bytes) -> bytes:
		if len(digest) != DIGEST_LENGTH:
			raise ValueError(f"digest must be {DIGEST_LENGTH} bytes, got {len(digest)}")
		try:
			# OpenSSL draws the nonce from its own CSPRNG
			der = self._private_key.sign(bytes(digest), ECDSA_PREHASHED_SHA256)
		except InternalError as e:
			logger.debug("ecdsa signing failed for %s: %s", self.did(), e)
			raise SigningError(f"failed to sign: {e}") from e
		return sigcodec.from_der(der)


def parse(did: str) -> PublicDIDKey:
	try:
		pubkey = identifier.decode_public_key(did)
	except InvalidDIDError as e:
		logger.debug("rejected %r: %s", did, e)
		raise
	return PublicDIDKey.from_public_key(pubkey)


def from_private_scalar(d: bytes) -> PrivateDIDKey:
	return PrivateDIDKey.from_private_scalar(d)
