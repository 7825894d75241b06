"""
kubeconfig-kit: Canonical Exceptions (v1)

Este módulo define as exceções tipadas do kubeconfig-kit.

Objetivo:
- Permitir que registry, generator e accessor levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para ErrorPayload (ver `core.errors`)
- Evitar ValueError/RuntimeError genéricos em validações de entrada do usuário

Hierarquia:
    KubeconfigKitError
    ├── ValidationError          (argumentos ausentes/inválidos, antes de qualquer mutação)
    │   ├── MissingNameError
    │   ├── NoSourcesError
    │   └── InvalidKeyError
    ├── NotFoundError            (nome referenciado ausente)
    ├── ConflictError            (destino ou chave já ocupado)
    │   └── DuplicateKeyError
    ├── SourceConflictError      (fontes mutuamente exclusivas combinadas)
    ├── MalformedInputError      (sintaxe inválida de literal ou linha de env-file)
    │   ├── MalformedLiteralError
    │   └── MalformedEnvLineError
    └── ConfigError              (estrutura inválida do documento de configuração)
        ├── UnsupportedConfigFormatError
        ├── InvalidConfigRootTypeError
        └── InvalidConfigStructureError

Erros de I/O (`OSError`) não são encapsulados: propagam sem interpretação.

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Mensagem curta, humana e de uma linha.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class KubeconfigKitError(Exception):
    """Base class para exceções do kubeconfig-kit.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Validação de argumentos
# ---------------------------------------------------------------------------

class ValidationError(KubeconfigKitError):
    """Argumento ausente ou inválido, detectado antes de qualquer mutação."""


class MissingNameError(ValidationError):
    """Nome do artefato não informado."""


class NoSourcesError(ValidationError):
    """Nenhuma fonte (file, literal ou env-file) foi informada."""


class InvalidKeyError(ValidationError):
    """Chave (explícita ou derivada do path) contém caracteres ilegais."""


# ---------------------------------------------------------------------------
# Estado do documento / artefato
# ---------------------------------------------------------------------------

class NotFoundError(KubeconfigKitError):
    """Nome referenciado não existe no mapeamento."""


class ConflictError(KubeconfigKitError):
    """Nome de destino ou chave já ocupado."""


class DuplicateKeyError(ConflictError):
    """Duas fontes resolveram para a mesma chave do artefato."""


class SourceConflictError(KubeconfigKitError):
    """Fontes mutuamente exclusivas foram combinadas."""


# ---------------------------------------------------------------------------
# Sintaxe de entrada
# ---------------------------------------------------------------------------

class MalformedInputError(KubeconfigKitError):
    """Sintaxe inválida em literal ou linha de env-file."""


class MalformedLiteralError(MalformedInputError):
    """Literal sem o formato key=value."""


class MalformedEnvLineError(MalformedInputError):
    """Linha de env-file sem o formato key=value (identifica o número da linha)."""


# ---------------------------------------------------------------------------
# Documento de configuração
# ---------------------------------------------------------------------------

class ConfigError(KubeconfigKitError):
    """
    Exceção base para erros estruturais do documento kubeconfig.

    Levantada durante carregamento e persistência quando o conteúdo do
    arquivo não pode ser interpretado como um documento válido.

    Limites explícitos:
        - Não representa erro de I/O (esses propagam como OSError)
        - Não valida alcançabilidade de clusters ou credenciais
    """


class UnsupportedConfigFormatError(ConfigError):
    """Formato de serialização não suportado pelo loader."""


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz do arquivo não é um mapa chave-valor."""


class InvalidConfigStructureError(ConfigError):
    """
    Seções do documento com forma inválida.

    Exemplos:
        - `contexts` não é uma lista
        - item de lista sem `name`
        - nome repetido dentro de uma mesma lista
    """
