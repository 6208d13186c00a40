"""PBKDF2 password hashing with self-describing ``algorithm$cost$salt$digest`` tokens."""

from .algorithms import SUPPORTED_ALGORITHMS, digest_size, get_hash_factory, is_supported
from .auth import (
	compare_hash_and_password,
	cost,
	generate_from_password,
	generate_salt,
	hash_password,
	needs_rehash,
	verify_password,
)
from .config import DEFAULT_POLICY, Config, HashPolicy, load_config, try_load_config
from .const import MAX_COST, MIN_COST
from .errors import (
	InvalidCost,
	InvalidHashFormat,
	InvalidHashFunction,
	InvalidKeyLength,
	MismatchedHashAndPassword,
	PwdHashError,
)
from .token import HashToken, decode_token, encode_token

__all__ = [
	"SUPPORTED_ALGORITHMS",
	"MIN_COST",
	"MAX_COST",
	"DEFAULT_POLICY",
	"Config",
	"HashPolicy",
	"HashToken",
	"PwdHashError",
	"InvalidCost",
	"InvalidKeyLength",
	"InvalidHashFunction",
	"InvalidHashFormat",
	"MismatchedHashAndPassword",
	"compare_hash_and_password",
	"cost",
	"decode_token",
	"digest_size",
	"encode_token",
	"generate_from_password",
	"generate_salt",
	"get_hash_factory",
	"hash_password",
	"is_supported",
	"load_config",
	"needs_rehash",
	"try_load_config",
	"verify_password",
]
