from __future__ import annotations

import pytest

from pwdhash import generate_from_password, generate_salt


LOW_COST = 1_000


@pytest.fixture
def salt16() -> bytes:
	return generate_salt(16)


@pytest.fixture
def sha256_token(salt16: bytes) -> str:
	return generate_from_password("password", salt16, LOW_COST, 32, "sha256")
