"""
Superfície de comandos do kubeconfig-kit (typer).

Comandos:
    kubeconfig-kit config rename-context OLD NEW
    kubeconfig-kit config use-context NAME
    kubeconfig-kit config current-context
    kubeconfig-kit config get-contexts
    kubeconfig-kit update configmap NAME [--from-file ...] [--from-literal ...] [--from-env-file PATH]

Todo comando segue complete → validate → run.

Decisões arquiteturais:
    - Exceções tipadas viram uma única linha `error: ...` em stderr
      (seguida de `hint: ...` quando houver) e um código de saída não-zero
    - Erros de argumento usam o código de uso (2); os demais usam 1

Limites explícitos:
    - Não envia ConfigMaps a um cluster
"""

import logging
from typing import Callable, List, Optional, TypeVar

import typer

from kubeconfig_kit.core.context import CommandContext
from kubeconfig_kit.core.errors import exception_to_error
from kubeconfig_kit.core.exceptions import (
    KubeconfigKitError,
    MalformedInputError,
    SourceConflictError,
    ValidationError,
)
from kubeconfig_kit.generator.configmap import UpdateConfigMapOptions
from kubeconfig_kit.kubeconfig.access import PathOptions, config_file_for, config_session
from kubeconfig_kit.registry.contexts import current_context, list_context_names, use_context
from kubeconfig_kit.registry.rename import RenameContextOptions


# Códigos de saída
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2

T = TypeVar("T")

app = typer.Typer(
    name="kubeconfig-kit",
    help="Manage kubeconfig contexts and generate ConfigMaps.",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Modify kubeconfig files", no_args_is_help=True)
update_app = typer.Typer(help="Update resources from local sources", no_args_is_help=True)
app.add_typer(config_app, name="config")
app.add_typer(update_app, name="update")


def exit_code_for(exc: BaseException) -> int:
    if isinstance(exc, (ValidationError, SourceConflictError, MalformedInputError)):
        return EXIT_USAGE_ERROR
    return EXIT_ERROR


def _execute(fn: Callable[[], T]) -> T:
    """Executa o corpo de um comando, convertendo erros tipados e de I/O em saída limpa."""
    try:
        return fn()
    except (KubeconfigKitError, OSError) as exc:
        payload = exception_to_error(exc)
        typer.echo(f"error: {payload.message}", err=True)
        if payload.hint:
            typer.echo(f"hint: {payload.hint}", err=True)
        raise typer.Exit(code=exit_code_for(exc))


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Linha de comando do kubeconfig-kit."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@config_app.callback()
def config_callback(
    ctx: typer.Context,
    kubeconfig: Optional[str] = typer.Option(
        None, "--kubeconfig", help="Path to the kubeconfig file to use"
    ),
) -> None:
    ctx.obj = PathOptions(explicit_file=kubeconfig)


@config_app.command("rename-context")
def rename_context_cmd(
    ctx: typer.Context,
    context_name: str = typer.Argument(..., metavar="CONTEXT_NAME", help="Context to rename"),
    new_name: str = typer.Argument(..., metavar="NEW_NAME", help="New name for the context"),
) -> None:
    """Renomeia um contexto do arquivo kubeconfig."""
    options = RenameContextOptions(config_access=ctx.obj)

    def body() -> None:
        options.complete([context_name, new_name])
        options.validate()
        options.run(CommandContext())

    _execute(body)


@config_app.command("use-context")
def use_context_cmd(
    ctx: typer.Context,
    context_name: str = typer.Argument(..., metavar="CONTEXT_NAME"),
) -> None:
    """Define o current-context do arquivo kubeconfig."""
    access = ctx.obj

    def body() -> None:
        with config_session(access) as session:
            session.config = use_context(session.config, context_name, config_file=session.config_file)
        typer.echo(f'Switched to context "{context_name}".')

    _execute(body)


@config_app.command("current-context")
def current_context_cmd(ctx: typer.Context) -> None:
    """Exibe o current-context."""
    access = ctx.obj
    typer.echo(_execute(lambda: current_context(access.get_starting_config())))


@config_app.command("get-contexts")
def get_contexts_cmd(ctx: typer.Context) -> None:
    """Lista os contextos do arquivo kubeconfig, marcando o atual."""
    access = ctx.obj

    def body() -> List[str]:
        config = access.get_starting_config()
        lines = []
        for name in list_context_names(config):
            entry = config.contexts[name]
            marker = "*" if name == config.current_context else " "
            lines.append(f"{marker} {name}\t{entry.cluster}\t{entry.user}\t{entry.namespace or ''}")
        return lines

    lines = _execute(body)
    if not lines:
        typer.echo(f"no contexts found in {config_file_for(access)}", err=True)
    for line in lines:
        typer.echo(line)


@update_app.command("configmap")
def update_configmap_cmd(
    name: str = typer.Argument(..., metavar="NAME"),
    from_file: Optional[List[str]] = typer.Option(
        None,
        "--from-file",
        help="Key file as [key=]path; a directory adds every regular file whose name is a valid key.",
    ),
    from_literal: Optional[List[str]] = typer.Option(
        None, "--from-literal", help="Key and literal value (i.e. mykey=somevalue)."
    ),
    from_env_file: str = typer.Option(
        "", "--from-env-file", help="Path to a file of key=val lines (i.e. a Docker .env file)."
    ),
    append_hash: bool = typer.Option(
        False, "--append-hash", help="Append a hash of the content to the name."
    ),
    output: str = typer.Option("", "--output", "-o", help="Print the generated ConfigMap (yaml|json)."),
) -> None:
    """Gera um ConfigMap a partir de arquivos, diretórios, literais ou env-file."""
    options = UpdateConfigMapOptions()

    def body() -> None:
        options.complete(
            [name],
            from_file=from_file or [],
            from_literal=from_literal or [],
            from_env_file=from_env_file,
            append_hash=append_hash,
            output=output,
        )
        options.validate()
        options.run(CommandContext())

    _execute(body)


update_app.command("cm", hidden=True)(update_configmap_cmd)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
