"""Parser de env-files (linhas `key=value`, no estilo `docker --env-file`).

Regras (v1):
- BOM UTF-8 é removido da primeira linha
- linhas em branco e linhas iniciadas por `#` são ignoradas
- espaços à esquerda da chave são descartados; o valor é mantido literal
- linha sem `=`, com chave vazia ou que não é UTF-8 → MalformedEnvLineError
  (com número da linha)
- chave ilegal → InvalidKeyError (com número da linha)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from kubeconfig_kit.core.exceptions import MalformedEnvLineError

from .keys import validate_key


_BOM = "\ufeff"


@dataclass(frozen=True)
class EnvLine:
    lineno: int
    key: str
    value: str


def parse_env_lines(lines: List[str], *, path: str) -> List[EnvLine]:
    out: List[EnvLine] = []
    for idx, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if idx == 1 and line.startswith(_BOM):
            line = line[len(_BOM):]

        stripped = line.lstrip()
        if not stripped or stripped.startswith("#"):
            continue

        key, sep, value = stripped.partition("=")
        if not sep or not key:
            raise MalformedEnvLineError(
                f"{path}:{idx}: expected key=value, got {line!r}",
                details={"path": path, "line": idx},
            )

        validate_key(key, source=f"{path}:{idx}")
        out.append(EnvLine(lineno=idx, key=key, value=value))
    return out


def parse_env_file(path: Union[str, Path]) -> List[EnvLine]:
    raw_lines = Path(path).read_bytes().splitlines(keepends=True)
    lines: List[str] = []
    for idx, raw in enumerate(raw_lines, start=1):
        try:
            lines.append(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise MalformedEnvLineError(
                f"{path}:{idx}: line is not valid UTF-8 ({e.reason})",
                details={"path": str(path), "line": idx},
            ) from e
    return parse_env_lines(lines, path=str(path))
