# src/kubeconfig_kit/registry/__init__.py
"""
Registry de contextos nomeados.

- contexts → funções puras sobre `KubeConfig` (get, list, use, rename)
- rename   → opções do comando `config rename-context`
"""

from .contexts import current_context, get_context, list_context_names, rename_context, use_context
from .rename import RenameContextOptions

__all__ = [
    "RenameContextOptions",
    "current_context",
    "get_context",
    "list_context_names",
    "rename_context",
    "use_context",
]
