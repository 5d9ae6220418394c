class DIDKeyError(Exception):
	pass


class InvalidDIDError(DIDKeyError, ValueError):
	"""Raised when a string cannot be parsed as a P-256 did:key."""


class InvalidFormatError(InvalidDIDError):
	pass


class InvalidSchemeError(InvalidDIDError):
	pass


class InvalidMethodError(InvalidDIDError):
	pass


class EmptyIdentifierError(InvalidDIDError):
	pass


class MissingPrefixError(InvalidDIDError):
	pass


class InvalidEncodingError(InvalidDIDError):
	pass


class MalformedEnvelopeError(InvalidDIDError):
	pass


class UnsupportedKeyTypeError(InvalidDIDError):
	def __init__(self, code: int):
		super().__init__(f"multicodec not supported; code: 0x{code:x}")
		self.code = code


class InvalidPointError(InvalidDIDError):
	pass


class InvalidKeyLengthError(InvalidDIDError):
	pass


class NoPrivateKeyError(DIDKeyError):
	pass


class SigningError(DIDKeyError):
	pass
