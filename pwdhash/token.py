from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import List, Union

from .algorithms import get_hash_factory
from .const import (
	ALGORITHM_INDEX,
	COST_BASE,
	COST_BIT_SIZE,
	COST_INDEX,
	COST_MAX_DIGITS,
	DELIMITER,
	DIGEST_INDEX,
	FIELD_COUNT,
	MAX_COST,
	MIN_COST,
	SALT_INDEX,
)
from .errors import InvalidCost, InvalidHashFormat


TokenInput = Union[str, bytes, bytearray]

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class HashToken:
	algorithm: str
	cost: int
	salt: bytes
	digest: bytes

	def encode(self) -> str:
		return encode_token(self.algorithm, self.cost, self.salt, self.digest)


def _b64(raw: bytes) -> str:
	return base64.b64encode(raw).decode("ascii")


def _b64d(field: str, reason: str) -> bytes:
	try:
		raw = base64.b64decode(field, validate=True)
	except (binascii.Error, ValueError) as e:
		raise InvalidHashFormat(reason) from e
	# extra padding and non-zero pad bits decode without error
	if _b64(raw) != field:
		raise InvalidHashFormat(reason)
	return raw


def _as_text(token: TokenInput) -> str:
	if isinstance(token, (bytes, bytearray)):
		try:
			return bytes(token).decode("ascii")
		except UnicodeDecodeError as e:
			raise InvalidHashFormat("token is not ASCII text") from e
	if not token.isascii():
		raise InvalidHashFormat("token is not ASCII text")
	return token


def _split(token: TokenInput) -> List[str]:
	fields = _as_text(token).split(DELIMITER)
	if len(fields) != FIELD_COUNT:
		raise InvalidHashFormat("wrong field count")
	return fields


def _parse_cost_field(field: str) -> int:
	# int() alone would also accept signs, whitespace and underscores
	if not field or len(field) > COST_MAX_DIGITS or not set(field) <= _DIGITS:
		raise InvalidHashFormat("invalid cost encoding")
	value = int(field, COST_BASE)
	if value >= 2**COST_BIT_SIZE:
		raise InvalidHashFormat("invalid cost encoding")
	return value


def encode_token(algorithm: str, cost: int, salt: bytes, digest: bytes) -> str:
	if not MIN_COST <= cost <= MAX_COST:
		raise InvalidCost(cost)
	get_hash_factory(algorithm)
	fields = [None] * FIELD_COUNT
	fields[ALGORITHM_INDEX] = algorithm
	fields[COST_INDEX] = str(cost)
	fields[SALT_INDEX] = _b64(salt)
	fields[DIGEST_INDEX] = _b64(digest)
	return DELIMITER.join(fields)


def decode_token(token: TokenInput) -> HashToken:
	"""Parse and validate a token.

	Decoded salt and digest bytes are returned exactly as base64 yields them;
	trailing zero bytes are part of the value.
	"""
	fields = _split(token)
	algorithm = fields[ALGORITHM_INDEX]
	get_hash_factory(algorithm)
	cost = _parse_cost_field(fields[COST_INDEX])
	salt = _b64d(fields[SALT_INDEX], "invalid salt encoding")
	digest = _b64d(fields[DIGEST_INDEX], "invalid digest encoding")
	if not digest:
		raise InvalidHashFormat("empty digest")
	return HashToken(algorithm=algorithm, cost=cost, salt=salt, digest=digest)


def parse_cost(token: TokenInput) -> int:
	return _parse_cost_field(_split(token)[COST_INDEX])
