from __future__ import annotations

import hashlib
from types import MappingProxyType
from typing import Callable, Mapping

from .errors import InvalidHashFunction


HashFactory = Callable[[], "hashlib._Hash"]

# name -> constructor; the accepted identifiers are the keys of this mapping
_REGISTRY: Mapping[str, HashFactory] = MappingProxyType({
	"md5": hashlib.md5,
	"sha1": hashlib.sha1,
	"sha256": hashlib.sha256,
	"sha512": hashlib.sha512,
})

SUPPORTED_ALGORITHMS = tuple(_REGISTRY)


def is_supported(name: str) -> bool:
	return isinstance(name, str) and name in _REGISTRY


def get_hash_factory(name: str) -> HashFactory:
	if not is_supported(name):
		raise InvalidHashFunction(name)
	return _REGISTRY[name]


def digest_size(name: str) -> int:
	"""Natural output size in bytes, e.g. 32 for sha256."""
	return get_hash_factory(name)().digest_size
