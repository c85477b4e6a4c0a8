from __future__ import annotations

import re
from typing import Mapping, Optional


DEFAULT_LIMIT = 20
MAX_LIMIT = 100
DEFAULT_OFFSET = 0

# signed 64-bit range, leading sign allowed, digits only
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


class InvalidParameter(ValueError):
    def __init__(self, param: str, message: str) -> None:
        super().__init__(message)
        self.param = param
        self.message = message


def _parse_int(raw: str) -> Optional[int]:
    if not _INT_RE.fullmatch(raw):
        return None
    value = int(raw)
    if value < _INT64_MIN or value > _INT64_MAX:
        return None
    return value


def parse_pagination(query_params: Mapping[str, str]) -> tuple[int, int]:
    """
    Retourne (limit, offset) depuis les query params.

    - limit absent/vide -> 20 ; sinon entier > 0, plafonne a 100 sans erreur
    - offset absent/vide -> 0 ; sinon entier >= 0, pas de borne haute

    Le plafonnement n'est pas signale dans la valeur retournee : l'appelant ne
    peut pas distinguer "limit=100" de "limit=500 plafonne".
    """
    raw_limit = query_params.get("limit")
    if not raw_limit:
        limit = DEFAULT_LIMIT
    else:
        parsed = _parse_int(raw_limit)
        if parsed is None or parsed <= 0:
            raise InvalidParameter("limit", "limit must be a positive integer")
        limit = parsed

    if limit > MAX_LIMIT:
        limit = MAX_LIMIT

    raw_offset = query_params.get("offset")
    if not raw_offset:
        offset = DEFAULT_OFFSET
    else:
        parsed = _parse_int(raw_offset)
        if parsed is None or parsed < 0:
            raise InvalidParameter("offset", "offset must be a non-negative integer")
        offset = parsed

    return limit, offset
