import logging
import os
import sys

from .errors import DIDKeyError
from .key import PrivateDIDKey, parse

USAGE = """USAGE: python -m didkey <command> [args]
  new
  from-scalar <hex_scalar>
  inspect <did>
  sign <hex_scalar> <hex_digest>
  verify <did> <hex_digest> <hex_signature>"""


def cmd_new() -> int:
	key = PrivateDIDKey.generate()
	print(key.did())
	print(key.private_bytes().hex())
	return 0


def cmd_from_scalar(hex_scalar: str) -> int:
	print(PrivateDIDKey.from_private_scalar(bytes.fromhex(hex_scalar)).did())
	return 0


def cmd_inspect(did: str) -> int:
	key = parse(did)
	print(f"x = {key.x:064x}")
	print(f"y = {key.y:064x}")
	return 0


def cmd_sign(hex_scalar: str, hex_digest: str) -> int:
	key = PrivateDIDKey.from_private_scalar(bytes.fromhex(hex_scalar))
	print(key.sign(bytes.fromhex(hex_digest)).hex())
	return 0


def cmd_verify(did: str, hex_digest: str, hex_signature: str) -> int:
	key = parse(did)
	if key.verify(bytes.fromhex(hex_digest), bytes.fromhex(hex_signature)):
		print("valid")
		return 0
	print("invalid")
	return 1


COMMANDS = {
	"new": (cmd_new, 0),
	"from-scalar": (cmd_from_scalar, 1),
	"inspect": (cmd_inspect, 1),
	"sign": (cmd_sign, 2),
	"verify": (cmd_verify, 3),
}


def main(argv) -> int:
	level = os.environ.get("DIDKEY_LOG_LEVEL")
	if level:
		logging.basicConfig(level=level.upper())

	if not argv or argv[0] not in COMMANDS:
		print(USAGE)
		return 2
	cmd, nargs = COMMANDS[argv[0]]
	if len(argv) - 1 != nargs:
		print(USAGE)
		return 2
	try:
		return cmd(*argv[1:])
	except (DIDKeyError, ValueError) as e:
		print(f"{type(e).__name__}: {e}")
		return 1


if __name__ == "__main__":
	sys.exit(main(sys.argv[1:]))
