# src/kubeconfig_kit/registry/contexts.py
"""
Registry de contextos nomeados.

Este módulo concentra as operações do registry sobre um `KubeConfig` já
carregado: consulta, listagem, leitura e troca da seleção corrente e
renomeação de contextos.

Todas as operações de escrita são funções puras: recebem um documento e
devolvem um novo documento, sem mutar o de entrada. Em caso de erro nenhum
documento é produzido, logo nada pode ser persistido parcialmente.

Invariantes:
    - Nomes de contexto são únicos
    - Após um rename bem-sucedido, `current_context` nunca aponta para o
      nome antigo
    - O valor de um contexto renomeado é preservado integralmente

Limites explícitos:
    - Não carrega nem persiste arquivos (ver `kubeconfig.access`)
    - Não valida alcançabilidade de clusters ou credenciais
"""

from __future__ import annotations

from dataclasses import replace
from typing import List

from kubeconfig_kit.core.exceptions import ConflictError, NotFoundError, ValidationError
from kubeconfig_kit.kubeconfig.document import ContextEntry, KubeConfig


def _where(config_file: str) -> str:
    return config_file or "the kubeconfig"


def get_context(config: KubeConfig, name: str, *, config_file: str = "") -> ContextEntry:
    """Retorna o contexto `name` ou levanta `NotFoundError`."""
    try:
        return config.contexts[name]
    except KeyError:
        raise NotFoundError(
            f"context {name!r} not found in {_where(config_file)}",
            details={"context": name, "config_file": config_file},
        ) from None


def list_context_names(config: KubeConfig) -> List[str]:
    return sorted(config.contexts)


def current_context(config: KubeConfig) -> str:
    if not config.current_context:
        raise NotFoundError("current-context is not set", details={})
    return config.current_context


def use_context(config: KubeConfig, name: str, *, config_file: str = "") -> KubeConfig:
    """Aponta `current_context` para um contexto existente."""
    if not name:
        raise ValidationError("context name must not be empty")
    if name not in config.contexts:
        raise NotFoundError(
            f"no context exists with the name {name!r} in {_where(config_file)}",
            details={"context": name, "config_file": config_file},
        )
    return replace(config, current_context=name)


def rename_context(config: KubeConfig, old_name: str, new_name: str, *, config_file: str = "") -> KubeConfig:
    """
    Renomeia o contexto `old_name` para `new_name`.

    O contexto é removido sob o nome antigo e reinserido, inalterado, sob o
    novo nome. Se `current_context` era `old_name`, passa a ser `new_name`.
    Os demais contextos e campos do documento não são tocados.

    A operação não é idempotente: repetir a mesma chamada sobre o resultado
    falha com `NotFoundError`, pois o nome antigo não existe mais.

    Args:
        config (KubeConfig): Documento carregado (não é mutado).
        old_name (str): Nome atual do contexto.
        new_name (str): Novo nome, não vazio e ainda não utilizado.
        config_file (str): Caminho do arquivo, usado apenas nas mensagens.

    Returns:
        KubeConfig: Novo documento com o contexto renomeado.

    Raises:
        ValidationError: Se `new_name` for vazio.
        NotFoundError: Se `old_name` não existir.
        ConflictError: Se `new_name` já existir.
    """
    if not new_name:
        raise ValidationError("new name must not be empty", details={"context": old_name})

    if old_name not in config.contexts:
        raise NotFoundError(
            f"cannot rename the context {old_name!r}, it's not in {_where(config_file)}",
            details={"context": old_name, "config_file": config_file},
        )

    if new_name in config.contexts:
        raise ConflictError(
            f"cannot rename the context {old_name!r}, the context {new_name!r} "
            f"already exists in {_where(config_file)}",
            details={"context": old_name, "new_name": new_name, "config_file": config_file},
        )

    contexts = {name: entry for name, entry in config.contexts.items() if name != old_name}
    contexts[new_name] = config.contexts[old_name]

    current = config.current_context
    if current == old_name:
        current = new_name

    return replace(config, contexts=contexts, current_context=current)
