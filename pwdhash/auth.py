from __future__ import annotations

import hashlib
import hmac
import os
from typing import Optional, Union

from .algorithms import get_hash_factory
from .config import DEFAULT_POLICY, HashPolicy
from .const import MAX_COST, MAX_KEY_LENGTH, MIN_COST
from .errors import InvalidCost, InvalidKeyLength, MismatchedHashAndPassword
from .token import TokenInput, decode_token, encode_token, parse_cost

Password = Union[str, bytes]


def _password_bytes(password: Password) -> bytes:
	if isinstance(password, str):
		return password.encode("utf-8")
	return bytes(password)


def generate_salt(length: int) -> bytes:
	"""Return `length` bytes from the OS CSPRNG.

	Do not reuse a salt across passwords. A common rule of thumb is to make
	the salt the same size as the digest.
	"""
	salt = os.urandom(length)
	if len(salt) != length:
		raise OSError(f"random source returned {len(salt)} of {length} bytes")
	return salt


def generate_from_password(
	password: Password,
	salt: bytes,
	cost: int,
	key_length: int,
	algorithm: str,
) -> str:
	"""Derive a PBKDF2-HMAC digest and return it as a token.

	The token has the form ``<algorithm>$<cost>$<base64(salt)>$<base64(digest)>``.
	`cost` is the iteration count and must lie in [MIN_COST, MAX_COST];
	`key_length` is the digest size in bytes. md5 and sha1 are accepted for
	compatibility only. All parameters are checked before any derivation.
	"""
	if not MIN_COST <= cost <= MAX_COST:
		raise InvalidCost(cost)
	if not 1 <= key_length <= MAX_KEY_LENGTH:
		raise InvalidKeyLength(key_length)
	hash_name = get_hash_factory(algorithm)().name

	digest = hashlib.pbkdf2_hmac(hash_name, _password_bytes(password), bytes(salt), cost, key_length)
	return encode_token(algorithm, cost, salt, digest)


def cost(token: TokenInput) -> int:
	"""Iteration count a token was created with, for rehash-on-login checks.

	Only the field count and the cost field are validated.
	"""
	return parse_cost(token)


def compare_hash_and_password(token: TokenInput, password: Password) -> None:
	"""Raise MismatchedHashAndPassword unless `password` produced `token`.

	Format errors in `token` propagate as they are, so a corrupted record is
	never reported as a wrong password. The whole re-encoded token is compared
	in constant time.
	"""
	parsed = decode_token(token)
	guess = generate_from_password(password, parsed.salt, parsed.cost, len(parsed.digest), parsed.algorithm)

	stored = bytes(token) if isinstance(token, (bytes, bytearray)) else token.encode("ascii")
	if not hmac.compare_digest(stored, guess.encode("ascii")):
		raise MismatchedHashAndPassword()


def hash_password(password: Password, policy: Optional[HashPolicy] = None) -> str:
	policy = policy or DEFAULT_POLICY
	salt = generate_salt(policy.salt_length)
	return generate_from_password(password, salt, policy.cost, policy.key_length, policy.algorithm)


def verify_password(password: Password, token: TokenInput) -> bool:
	try:
		compare_hash_and_password(token, password)
	except MismatchedHashAndPassword:
		return False
	return True


def needs_rehash(token: TokenInput, policy: Optional[HashPolicy] = None) -> bool:
	policy = policy or DEFAULT_POLICY
	parsed = decode_token(token)
	return (
		parsed.algorithm != policy.algorithm
		or parsed.cost < policy.cost
		or len(parsed.digest) != policy.key_length
	)
