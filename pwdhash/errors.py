from __future__ import annotations

from .const import MAX_COST, MAX_KEY_LENGTH, MIN_COST


class PwdHashError(Exception):
	pass


class InvalidCost(PwdHashError, ValueError):
	def __init__(self, cost: int) -> None:
		self.cost = cost
		super().__init__(f"cost {cost} is outside the valid range of iterations [{MIN_COST}, {MAX_COST}]")


class InvalidKeyLength(PwdHashError, ValueError):
	def __init__(self, key_length: int) -> None:
		self.key_length = key_length
		super().__init__(f"key length {key_length} is not a valid byte count [1, {MAX_KEY_LENGTH}]")


class InvalidHashFunction(PwdHashError, ValueError):
	def __init__(self, name: str) -> None:
		self.name = name
		super().__init__(f"hash function {name!r} is not supported/valid")


class InvalidHashFormat(PwdHashError, ValueError):
	def __init__(self, reason: str) -> None:
		self.reason = reason
		super().__init__(f"hashed password is not of the expected format: {reason}")


class MismatchedHashAndPassword(PwdHashError):
	def __init__(self) -> None:
		super().__init__("hashed password is not the hash of the given password")
