from __future__ import annotations


# PBKDF2 iteration bounds accepted by generate_from_password
MIN_COST = 1
MAX_COST = 2**31 - 1

MAX_KEY_LENGTH = MAX_COST

# token wire format: <algorithm>$<cost>$<base64(salt)>$<base64(digest)>
DELIMITER = "$"
FIELD_COUNT = 4

ALGORITHM_INDEX = 0
COST_INDEX = 1
SALT_INDEX = 2
DIGEST_INDEX = 3

COST_BASE = 10
COST_BIT_SIZE = 64
# digits in 2**64 - 1
COST_MAX_DIGITS = 20
