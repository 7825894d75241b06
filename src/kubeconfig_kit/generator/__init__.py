# src/kubeconfig_kit/generator/__init__.py
"""
Generator de artefatos chave → bytes (ConfigMaps).

- keys      → legalidade de chaves
- sources   → variante fechada de fontes e expansão por variante
- envfile   → parser de env-files
- artifact  → artefato imutável, manifest e hash
- configmap → validação ordenada, pipeline de geração e comando `update configmap`
"""

from .artifact import Artifact
from .configmap import ConfigMapGenerator, UpdateConfigMapOptions
from .sources import DirectorySource, EnvFileSource, FileSource, LiteralSource

__all__ = [
    "Artifact",
    "ConfigMapGenerator",
    "DirectorySource",
    "EnvFileSource",
    "FileSource",
    "LiteralSource",
    "UpdateConfigMapOptions",
]
