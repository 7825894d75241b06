# src/kubeconfig_kit/core/context.py
"""
Contexto explícito de uma invocação de comando.

Este módulo define o `CommandContext`, a estrutura canônica passada às
operações do registry e do generator durante uma única invocação.

O CommandContext substitui estado global compartilhado entre subcomandos:
tudo o que uma operação precisa para produzir saída ou registrar sinais
chega por ele, o que torna cada operação testável com streams em memória.

Responsabilidades do módulo:
    - Manter identidade e timestamp da invocação
    - Expor streams de saída (`out`) e erro (`err`)
    - Registrar eventos de log estruturados
    - Coletar warnings não fatais por operação

Invariantes:
    - Eventos sempre incluem `command_id` e `op`
    - Warnings são agrupados por `op`
    - Cada invocação possui seu próprio contexto

Limites explícitos:
    - Não carrega nem persiste configuração
    - Não decide códigos de saída
    - Não formata erros (ver `core.errors`)
"""

from __future__ import annotations

import io
import logging
import sys
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, TextIO


logger = logging.getLogger("kubeconfig_kit")

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


@dataclass
class CommandContext:
    """
    Contexto de uma invocação de comando.

    Decisões arquiteturais:
        - Operações escrevem apenas em `out`/`err`, nunca direto em sys.stdout
        - Logs são eventos estruturados e também espelhados no logger
          `kubeconfig_kit` do módulo `logging`
        - Warnings não interrompem a operação

    Limites explícitos:
        - Não persiste eventos
        - Não executa operações
    """

    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)
    command_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    @classmethod
    def in_memory(cls) -> "CommandContext":
        """Contexto com streams em memória (útil em testes e chamadas embutidas)."""
        return cls(out=io.StringIO(), err=io.StringIO())

    # -----------------------------
    # Output
    # -----------------------------
    def write(self, text: str) -> None:
        self.out.write(text)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, op: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "command_id": self.command_id,
            "op": op,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)
        logger.log(_LEVELS.get(level.upper(), logging.INFO), "[%s] %s", op, message, extra={"event": event})

    def add_warning(self, *, op: str, message: str) -> None:
        if op not in self.warnings:
            self.warnings[op] = []
        self.warnings[op].append(message)
        self.log(op=op, level="WARNING", message=message)
