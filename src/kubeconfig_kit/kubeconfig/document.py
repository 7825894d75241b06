# src/kubeconfig_kit/kubeconfig/document.py
"""
Modelo em memória do documento kubeconfig.

Este módulo define as estruturas canônicas sobre as quais o registry de
contextos opera: `KubeConfig` (o documento) e `ContextEntry` (um contexto
nomeado que aponta para um par cluster + credencial).

O formato em disco usa listas nomeadas (`contexts: [{name, context}]`);
em memória essas listas viram dicionários indexados por nome, o que torna
a unicidade de nomes um invariante estrutural desde o carregamento.

Princípios fundamentais:
    - Estruturas imutáveis (frozen); mutações produzem novos documentos
    - Round-trip sem perda: campos desconhecidos são preservados em `extra`
    - Serialização determinística (nomes ordenados)

Invariantes:
    - Nomes são únicos dentro de `contexts`, `clusters` e `users`
    - `current_context` é vazio ou (fora de uma operação em andamento)
      uma chave de `contexts`

Limites explícitos:
    - Não lê nem escreve arquivos (ver `kubeconfig.loader`)
    - Não interpreta clusters nem credenciais
    - Não realiza migração de versões de schema
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from kubeconfig_kit.core.exceptions import InvalidConfigStructureError


_CONTEXT_FIELDS = ("cluster", "user", "namespace")

_DOCUMENT_FIELDS = (
    "apiVersion",
    "kind",
    "clusters",
    "users",
    "contexts",
    "current-context",
    "preferences",
    "extensions",
)


@dataclass(frozen=True)
class ContextEntry:
    """
    Contexto nomeado: referência a um cluster e a uma credencial.

    Para o registry este valor é opaco: ele é apenas movido entre nomes,
    nunca inspecionado ou alterado.
    """

    cluster: str = ""
    user: str = ""
    namespace: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ContextEntry":
        data = dict(data or {})
        return cls(
            cluster=str(data.get("cluster") or ""),
            user=str(data.get("user") or ""),
            namespace=data.get("namespace"),
            extra={k: deepcopy(v) for k, v in data.items() if k not in _CONTEXT_FIELDS},
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"cluster": self.cluster, "user": self.user}
        if self.namespace:
            out["namespace"] = self.namespace
        out.update(deepcopy(self.extra))
        return out


def _named_list(section: str, items: Any, inner_key: str) -> Dict[str, Dict[str, Any]]:
    """
    Converte uma lista nomeada do formato em disco em dicionário por nome.

    Raises:
        InvalidConfigStructureError: se a seção não for lista, se um item não
            tiver `name` ou se um nome aparecer duas vezes.
    """
    if items is None:
        return {}
    if not isinstance(items, list):
        raise InvalidConfigStructureError(
            f"section '{section}' must be a list, got {type(items).__name__}",
            details={"section": section},
        )

    out: Dict[str, Dict[str, Any]] = {}
    for idx, item in enumerate(items):
        if not isinstance(item, dict) or not isinstance(item.get("name"), str) or not item["name"]:
            raise InvalidConfigStructureError(
                f"entry #{idx} in '{section}' has no name",
                details={"section": section, "index": idx},
            )
        name = item["name"]
        if name in out:
            raise InvalidConfigStructureError(
                f"duplicate name {name!r} in '{section}'",
                details={"section": section, "name": name},
            )
        body = item.get(inner_key) or {}
        if not isinstance(body, dict):
            raise InvalidConfigStructureError(
                f"entry {name!r} in '{section}' must hold a mapping under '{inner_key}'",
                details={"section": section, "name": name},
            )
        out[name] = body
    return out


def _to_named_list(entries: Dict[str, Dict[str, Any]], inner_key: str) -> List[Dict[str, Any]]:
    return [{"name": name, inner_key: deepcopy(entries[name])} for name in sorted(entries)]


@dataclass(frozen=True)
class KubeConfig:
    """
    Documento kubeconfig carregado em memória.

    Decisões arquiteturais:
        - `contexts` é o único mapa que o registry altera
        - clusters, users, preferences e campos desconhecidos são carregados
          apenas para serem devolvidos intactos na persistência
        - Instâncias não são mutadas: operações usam `dataclasses.replace`

    Limites explícitos:
        - Não valida referências entre contextos, clusters e users
    """

    contexts: Dict[str, ContextEntry] = field(default_factory=dict)
    current_context: str = ""
    clusters: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    users: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    preferences: Dict[str, Any] = field(default_factory=dict)
    extensions: List[Any] = field(default_factory=list)
    api_version: str = "v1"
    kind: str = "Config"
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "KubeConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KubeConfig":
        """
        Reconstrói o documento a partir do formato em disco.

        Raises:
            InvalidConfigStructureError: se alguma seção tiver forma inválida.
        """
        contexts = {
            name: ContextEntry.from_dict(body)
            for name, body in _named_list("contexts", data.get("contexts"), "context").items()
        }
        preferences = data.get("preferences") or {}
        if not isinstance(preferences, dict):
            raise InvalidConfigStructureError(
                "section 'preferences' must be a mapping",
                details={"section": "preferences"},
            )
        extensions = data.get("extensions") or []
        if not isinstance(extensions, list):
            raise InvalidConfigStructureError(
                "section 'extensions' must be a list",
                details={"section": "extensions"},
            )

        return cls(
            contexts=contexts,
            current_context=str(data.get("current-context") or ""),
            clusters=_named_list("clusters", data.get("clusters"), "cluster"),
            users=_named_list("users", data.get("users"), "user"),
            preferences=deepcopy(preferences),
            extensions=deepcopy(extensions),
            api_version=str(data.get("apiVersion") or "v1"),
            kind=str(data.get("kind") or "Config"),
            extra={k: deepcopy(v) for k, v in data.items() if k not in _DOCUMENT_FIELDS},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serializa no formato em disco, com nomes em ordem estável."""
        out: Dict[str, Any] = {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "clusters": _to_named_list(self.clusters, "cluster"),
            "users": _to_named_list(self.users, "user"),
            "contexts": [
                {"name": name, "context": self.contexts[name].to_dict()}
                for name in sorted(self.contexts)
            ],
            "current-context": self.current_context,
            "preferences": deepcopy(self.preferences),
        }
        if self.extensions:
            out["extensions"] = deepcopy(self.extensions)
        out.update(deepcopy(self.extra))
        return out
