# src/kubeconfig_kit/generator/sources.py
"""
Descritores de fonte do generator (variante fechada).

Cada fonte que pode alimentar um artefato é um tipo próprio e imutável:

    - LiteralSource   → `key=value` informado diretamente
    - FileSource      → `path` ou `key=path`; a chave padrão é o nome do arquivo
    - DirectorySource → cada arquivo regular diretamente dentro do diretório
    - EnvFileSource   → arquivo de linhas `key=value`

Para cada variante existe exatamente uma função de expansão, que produz
entradas `(key, value, origin)`. O pipeline de geração (`generator.configmap`)
apenas compõe essas funções em ordem; nenhuma decisão por tipo de fonte vive
fora deste módulo.

Decisões arquiteturais:
    - Parse (sintaxe) é separado de expansão (I/O)
    - Diretórios são enumerados em ordem de nome, para mensagens de erro
      reproduzíveis
    - Entradas de diretório que não são arquivos regulares são ignoradas
      silenciosamente; arquivos com nome ilegal como chave geram warning

Limites explícitos:
    - Não detecta chaves duplicadas (responsabilidade do pipeline)
    - Não percorre subdiretórios
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterator, NamedTuple, Optional, Union

from kubeconfig_kit.core.context import CommandContext
from kubeconfig_kit.core.exceptions import MalformedLiteralError, ValidationError

from .envfile import parse_env_file
from .keys import is_valid_key, validate_key


OP = "generator.sources"


class Entry(NamedTuple):
    key: str
    value: bytes
    origin: str


@dataclass(frozen=True)
class LiteralSource:
    key: str
    value: str

    def describe(self) -> str:
        return f"literal {self.key!r}"


@dataclass(frozen=True)
class FileSource:
    path: str
    key: Optional[str] = None

    def describe(self) -> str:
        return f"file {self.path!r}"


@dataclass(frozen=True)
class DirectorySource:
    path: str

    def describe(self) -> str:
        return f"directory {self.path!r}"


@dataclass(frozen=True)
class EnvFileSource:
    path: str

    def describe(self) -> str:
        return f"env-file {self.path!r}"


Source = Union[LiteralSource, FileSource, DirectorySource, EnvFileSource]


# ---------------------------------------------------------------------------
# Parse
# ---------------------------------------------------------------------------

def parse_literal_source(raw: str) -> LiteralSource:
    """`key=value` → LiteralSource. O valor pode conter `=`."""
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise MalformedLiteralError(
            f"invalid literal source {raw!r}, expected key=value",
            details={"source": raw},
        )
    validate_key(key, source=f"literal {raw!r}")
    return LiteralSource(key=key, value=value)


def parse_file_source(raw: str) -> FileSource:
    """`path` ou `key=path` → FileSource. A chave explícita é validada aqui."""
    if "=" not in raw:
        if not raw:
            raise ValidationError("file source must not be empty", details={"source": raw})
        return FileSource(path=raw)

    key, _, path = raw.partition("=")
    if not key:
        raise ValidationError(f"key name for file path {path!r} missing", details={"source": raw})
    if not path:
        raise ValidationError(f"file path for key name {key!r} missing", details={"source": raw})
    validate_key(key, source=f"file {path!r}")
    return FileSource(path=path, key=key)


# ---------------------------------------------------------------------------
# Expansão (uma função por variante)
# ---------------------------------------------------------------------------

def _expand_literal(source: LiteralSource, ctx: CommandContext) -> Iterator[Entry]:
    yield Entry(source.key, source.value.encode("utf-8"), source.describe())


def _expand_file(source: FileSource, ctx: CommandContext) -> Iterator[Entry]:
    path = Path(source.path)
    if path.is_dir():
        if source.key is not None:
            raise ValidationError(
                f"cannot give a key name for a directory path: {source.path!r}",
                details={"source": source.path, "key": source.key},
            )
        yield from _expand_directory(DirectorySource(source.path), ctx)
        return

    key = source.key if source.key is not None else validate_key(path.name, source=source.describe())
    yield Entry(key, path.read_bytes(), source.describe())


def _expand_directory(source: DirectorySource, ctx: CommandContext) -> Iterator[Entry]:
    with os.scandir(source.path) as it:
        items = sorted(it, key=lambda e: e.name)

    for item in items:
        if item.is_symlink() or not item.is_file(follow_symlinks=False):
            continue
        if not is_valid_key(item.name):
            ctx.add_warning(
                op=OP,
                message=f"skipping {item.path!r}: file name is not a valid key",
            )
            continue
        yield Entry(item.name, Path(item.path).read_bytes(), FileSource(item.path).describe())


def _expand_env_file(source: EnvFileSource, ctx: CommandContext) -> Iterator[Entry]:
    for line in parse_env_file(source.path):
        yield Entry(line.key, line.value.encode("utf-8"), f"{source.describe()} line {line.lineno}")


_EXPANDERS: Dict[type, Callable[..., Iterator[Entry]]] = {
    LiteralSource: _expand_literal,
    FileSource: _expand_file,
    DirectorySource: _expand_directory,
    EnvFileSource: _expand_env_file,
}


def expand(source: Source, ctx: CommandContext) -> Iterator[Entry]:
    """Expande qualquer fonte em entradas `(key, value, origin)`."""
    try:
        expander = _EXPANDERS[type(source)]
    except KeyError:
        raise TypeError(f"unsupported source type: {type(source).__name__}") from None
    return expander(source, ctx)
