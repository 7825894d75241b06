"""
kubeconfig-kit: Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros reportados ao operador.
Erros fazem parte do contrato operacional da ferramenta e devem ser:

- explícitos
- serializáveis
- acionáveis

Exceções tipadas (`core.exceptions`) são convertidas em `ErrorPayload`
por `exception_to_error`, que é o único ponto de mapeamento usado pela CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import (
    ConfigError,
    ConflictError,
    DuplicateKeyError,
    InvalidKeyError,
    KubeconfigKitError,
    MalformedEnvLineError,
    MalformedInputError,
    MalformedLiteralError,
    MissingNameError,
    NoSourcesError,
    NotFoundError,
    SourceConflictError,
    ValidationError,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do kubeconfig-kit.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e de uma linha
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Validação de argumentos
VALIDATION_ERROR = "VALIDATION_ERROR"
MISSING_NAME = "MISSING_NAME"
NO_SOURCES = "NO_SOURCES"
INVALID_KEY = "INVALID_KEY"

# Estado
NOT_FOUND = "NOT_FOUND"
ALREADY_EXISTS = "ALREADY_EXISTS"
DUPLICATE_KEY = "DUPLICATE_KEY"
CONFLICTING_SOURCES = "CONFLICTING_SOURCES"

# Sintaxe
MALFORMED_INPUT = "MALFORMED_INPUT"
MALFORMED_LITERAL = "MALFORMED_LITERAL"
MALFORMED_ENV_LINE = "MALFORMED_ENV_LINE"

# Documento / I/O
CONFIG_ERROR = "CONFIG_ERROR"
IO_ERROR = "IO_ERROR"
UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


# Ordem importa: subclasses antes das bases.
_CODES = (
    (MissingNameError, MISSING_NAME),
    (NoSourcesError, NO_SOURCES),
    (InvalidKeyError, INVALID_KEY),
    (ValidationError, VALIDATION_ERROR),
    (NotFoundError, NOT_FOUND),
    (DuplicateKeyError, DUPLICATE_KEY),
    (ConflictError, ALREADY_EXISTS),
    (SourceConflictError, CONFLICTING_SOURCES),
    (MalformedLiteralError, MALFORMED_LITERAL),
    (MalformedEnvLineError, MALFORMED_ENV_LINE),
    (MalformedInputError, MALFORMED_INPUT),
    (ConfigError, CONFIG_ERROR),
)


def error_code_for(exc: BaseException) -> str:
    """Retorna o código estável do catálogo para uma exceção."""
    for cls, code in _CODES:
        if isinstance(exc, cls):
            return code
    if isinstance(exc, OSError):
        return IO_ERROR
    return UNEXPECTED_ERROR


def exception_to_error(exc: BaseException) -> ErrorPayload:
    """Converte exceções em ErrorPayload (serializável, acionável).

    Regras:
    - KubeconfigKitError: já vem com message/details/hint.
    - OSError: encapsulada como IO_ERROR, preservando filename/errno.
    - Outras exceções: UNEXPECTED_ERROR sem expor stack trace.
    """
    code = error_code_for(exc)

    if isinstance(exc, KubeconfigKitError):
        return ErrorPayload(
            type=code,
            message=exc.message,
            details=dict(exc.details),
            hint=exc.hint,
        )

    if isinstance(exc, OSError):
        details: Dict[str, Any] = {"exception_class": exc.__class__.__name__}
        if exc.filename is not None:
            details["filename"] = str(exc.filename)
        if exc.errno is not None:
            details["errno"] = exc.errno
        return ErrorPayload(
            type=code,
            message=str(exc) or "Erro de I/O",
            details=details,
            hint="Verifique se o caminho existe e se há permissão de leitura/escrita.",
        )

    # Fallback genérico
    return ErrorPayload(
        type=code,
        message=str(exc) or "Erro inesperado",
        details={"exception_class": exc.__class__.__name__},
        hint=None,
    )
