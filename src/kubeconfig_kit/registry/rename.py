"""Comando canônico: config rename-context (v1).

Fluxo (mesmo padrão de todas as opções de comando):
- `complete(args)`: argumentos brutos → opções tipadas
- `validate()`: regras que não dependem do documento
- `run(ctx)`: carrega, renomeia, persiste e reporta

Limites explícitos (v1):
- NÃO persiste se qualquer etapa falhar
- NÃO implementa locking entre processos
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from kubeconfig_kit.core.context import CommandContext
from kubeconfig_kit.core.exceptions import ValidationError
from kubeconfig_kit.kubeconfig.access import ConfigAccess, config_session

from .contexts import rename_context


OP = "config.rename_context"


@dataclass
class RenameContextOptions:
    config_access: ConfigAccess
    context_name: str = ""
    new_name: str = ""

    def complete(self, args: Sequence[str]) -> "RenameContextOptions":
        if len(args) != 2:
            raise ValidationError(f"unexpected args: {list(args)}", details={"args": list(args)})
        self.context_name, self.new_name = args[0], args[1]
        return self

    def validate(self) -> None:
        if not self.new_name:
            raise ValidationError("new name must not be empty", details={"context": self.context_name})

    def run(self, ctx: CommandContext) -> None:
        with config_session(self.config_access) as session:
            session.config = rename_context(
                session.config,
                self.context_name,
                self.new_name,
                config_file=session.config_file,
            )

        ctx.log(
            op=OP,
            level="INFO",
            message="context renamed",
            old_name=self.context_name,
            new_name=self.new_name,
            config_file=session.config_file,
        )
        ctx.write(f'Context "{self.context_name}" was renamed to "{self.new_name}".\n')
