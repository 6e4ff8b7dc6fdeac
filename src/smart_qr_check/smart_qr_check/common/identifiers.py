from __future__ import annotations

import random
import string
import uuid
from typing import Callable, Optional

from ..core.constants import MAX_CODE_ATTEMPTS, QR_SUFFIX_LEN
from ..core.exceptions import DomainError

_BASE36 = string.digits + string.ascii_lowercase


def new_entity_id() -> str:
    return uuid.uuid4().hex


def new_qr_code(label: str, prefix_len: int, *, rng: Optional[random.Random] = None) -> str:
    """Build a `QR-<PREFIX>-<suffix>` token from a session topic or event name."""
    rng = rng or random.Random()
    prefix = label.strip()[:prefix_len].upper()
    suffix = "".join(rng.choice(_BASE36) for _ in range(QR_SUFFIX_LEN))
    return f"QR-{prefix}-{suffix}"


def normalize_code(code: str) -> str:
    return code.lower() if isinstance(code, str) else ""


def allocate_unique(
    generate: Callable[[], str],
    is_taken: Callable[[str], bool],
    *,
    attempts: int = MAX_CODE_ATTEMPTS,
) -> str:
    for _ in range(attempts):
        candidate = generate()
        if not is_taken(candidate):
            return candidate
    raise DomainError("Could not allocate a unique identifier")
