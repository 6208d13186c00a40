from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .algorithms import get_hash_factory
from .const import MAX_COST, MAX_KEY_LENGTH, MIN_COST
from .errors import InvalidCost, InvalidKeyLength


@dataclass(frozen=True)
class HashPolicy:
	algorithm: str = "sha256"
	cost: int = 200_000
	salt_length: int = 32
	key_length: int = 32

	def validate(self) -> "HashPolicy":
		get_hash_factory(self.algorithm)
		if not MIN_COST <= self.cost <= MAX_COST:
			raise InvalidCost(self.cost)
		if not 1 <= self.key_length <= MAX_KEY_LENGTH:
			raise InvalidKeyLength(self.key_length)
		if self.salt_length < 1:
			raise ValueError(f"salt length must be positive, got {self.salt_length}")
		return self


DEFAULT_POLICY = HashPolicy()


@dataclass
class Config:
	policy: HashPolicy = field(default_factory=HashPolicy)


def _load_json(path: Path) -> dict:
	with path.open("r", encoding="utf-8") as f:
		return json.load(f)


def load_config(config_path: str = "pwdhash.json") -> Config:
	path = Path(config_path)
	data = _load_json(path)

	raw = data.get("policy", {})
	policy = HashPolicy(
		algorithm=str(raw.get("algorithm", DEFAULT_POLICY.algorithm)),
		cost=int(raw.get("cost", DEFAULT_POLICY.cost)),
		salt_length=int(raw.get("salt_length", DEFAULT_POLICY.salt_length)),
		key_length=int(raw.get("key_length", DEFAULT_POLICY.key_length)),
	)
	return Config(policy=policy.validate())


def try_load_config(config_path: str = "pwdhash.json") -> Optional[Config]:
	path = Path(config_path)
	if not path.exists():
		return None
	return load_config(config_path)
