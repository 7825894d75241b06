# src/kubeconfig_kit/generator/artifact.py
"""
Artefato gerado: mapa plano chave → conteúdo em bytes.

O `Artifact` é produzido do zero a cada geração e é imutável depois de
retornado: `data` e `origins` são expostos como mapeamentos somente leitura.

Responsabilidades do módulo:
    - Representar o resultado de uma geração bem-sucedida
    - Renderizar o artefato como documento ConfigMap (v1)
    - Calcular um hash determinístico do conteúdo

Política de hashing (v1):
    - Serialização JSON canônica do manifest (chaves ordenadas, separadores
      compactos, UTF-8)
    - Algoritmo SHA-256
    - Sufixo de nome: primeiros 10 caracteres hexadecimais

Limites explícitos:
    - Não envia o artefato a nenhum store remoto
    - Não grava arquivos
"""

from __future__ import annotations

import base64
import hashlib
import json
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping


HASH_SUFFIX_LENGTH = 10


def _freeze(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Artifact:
    name: str
    data: Mapping[str, bytes] = field(default_factory=dict)
    origins: Mapping[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _freeze(self.data))
        object.__setattr__(self, "origins", _freeze(self.origins))

    def __len__(self) -> int:
        return len(self.data)

    def keys(self):
        return sorted(self.data)

    def to_manifest(self) -> Dict[str, Any]:
        """
        Renderiza o artefato como documento ConfigMap.

        Valores UTF-8 válidos vão para `data`; os demais vão, em base64,
        para `binaryData`. Seções vazias são omitidas.
        """
        text: Dict[str, str] = {}
        binary: Dict[str, str] = {}
        for key in sorted(self.data):
            value = self.data[key]
            try:
                text[key] = value.decode("utf-8")
            except UnicodeDecodeError:
                binary[key] = base64.b64encode(value).decode("ascii")

        manifest: Dict[str, Any] = {
            "apiVersion": "v1",
            "kind": "ConfigMap",
            "metadata": {"name": self.name},
        }
        if text:
            manifest["data"] = text
        if binary:
            manifest["binaryData"] = binary
        return manifest

    def content_hash(self) -> str:
        canonical_json = json.dumps(
            self.to_manifest(),
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
        )
        return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()

    def with_hash_suffix(self) -> "Artifact":
        """Novo artefato cujo nome recebe o sufixo `-<hash>` do conteúdo."""
        suffix = self.content_hash()[:HASH_SUFFIX_LENGTH]
        return replace(self, name=f"{self.name}-{suffix}")
