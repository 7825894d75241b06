"""Regras de legalidade de chaves do artefato (chaves de ConfigMap)."""

from __future__ import annotations

import re
from typing import Optional

from kubeconfig_kit.core.exceptions import InvalidKeyError


MAX_KEY_LENGTH = 253

_KEY_RE = re.compile(r"^[-._a-zA-Z0-9]+$")


def key_problem(key: str) -> Optional[str]:
    """Retorna a razão pela qual `key` é ilegal, ou None se for válida."""
    if not key:
        return "must not be empty"
    if len(key) > MAX_KEY_LENGTH:
        return f"must be no more than {MAX_KEY_LENGTH} characters"
    if key in (".", ".."):
        return f"must not be {key!r}"
    if not _KEY_RE.match(key):
        return "must consist of alphanumeric characters, '-', '_' or '.'"
    return None


def is_valid_key(key: str) -> bool:
    return key_problem(key) is None


def validate_key(key: str, *, source: str) -> str:
    """Retorna `key` inalterada ou levanta `InvalidKeyError` citando a fonte."""
    problem = key_problem(key)
    if problem is not None:
        raise InvalidKeyError(
            f"{key!r} is not a valid key name for a ConfigMap ({source}): {problem}",
            details={"key": key, "source": source},
        )
    return key
