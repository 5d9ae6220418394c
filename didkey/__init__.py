from .errors import (
	DIDKeyError,
	InvalidDIDError,
	InvalidFormatError,
	InvalidSchemeError,
	InvalidMethodError,
	EmptyIdentifierError,
	MissingPrefixError,
	InvalidEncodingError,
	MalformedEnvelopeError,
	UnsupportedKeyTypeError,
	InvalidPointError,
	InvalidKeyLengthError,
	NoPrivateKeyError,
	SigningError,
)
from .key import DIDKey, PublicDIDKey, PrivateDIDKey, parse, from_private_scalar

__all__ = [
	"DIDKey",
	"PublicDIDKey",
	"PrivateDIDKey",
	"parse",
	"from_private_scalar",
	"DIDKeyError",
	"InvalidDIDError",
	"InvalidFormatError",
	"InvalidSchemeError",
	"InvalidMethodError",
	"EmptyIdentifierError",
	"MissingPrefixError",
	"InvalidEncodingError",
	"MalformedEnvelopeError",
	"UnsupportedKeyTypeError",
	"InvalidPointError",
	"InvalidKeyLengthError",
	"NoPrivateKeyError",
	"SigningError",
]
