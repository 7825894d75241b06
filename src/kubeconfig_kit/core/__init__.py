# src/kubeconfig_kit/core/__init__.py
"""
Core do kubeconfig-kit.

Componentes:
    - exceptions → hierarquia de exceções tipadas
    - errors     → payload de erro serializável e catálogo de códigos
    - context    → CommandContext (streams, eventos estruturados, warnings)

Este pacote não depende de registry, generator ou CLI.
"""
