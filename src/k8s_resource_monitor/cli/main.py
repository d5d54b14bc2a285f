"""Main CLI entry point using Typer."""

from __future__ import annotations

from typing import Annotated, NoReturn

import typer
from rich.console import Console

from k8s_resource_monitor import __version__
from k8s_resource_monitor.cli.output import OutputFormat, get_formatter
from k8s_resource_monitor.core.config import (
    DEFAULT_INTERVAL_SECONDS,
    DEFAULT_NAMESPACE,
    DEFAULT_RESOURCE,
    RefreshConfig,
)
from k8s_resource_monitor.core.refresh import RefreshLoop
from k8s_resource_monitor.core.resources import ResourceKind
from k8s_resource_monitor.integrations.kubernetes import (
    KubernetesClient,
    KubernetesConnectionConfig,
    KubernetesConnectionError,
    default_kubeconfig_path,
)
from k8s_resource_monitor.logging.config import configure_logging
from k8s_resource_monitor.services.kubernetes import ResourceManager

app = typer.Typer(
    name="kmon",
    help="List Kubernetes resources as kubectl-style tables, optionally refreshing.",
    add_completion=True,
)

console = Console(emoji=False)

# Conventional exit status for SIGINT
EXIT_INTERRUPTED = 130


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"kmon version {__version__}")
        raise typer.Exit()


def handle_connection_error(error: KubernetesConnectionError) -> NoReturn:
    """Report a startup connection failure and exit.

    Raises:
        typer.Exit: Always exits with code 1.
    """
    console.print("[red]Error:[/red] Cannot connect to Kubernetes cluster")
    console.print(f"  {error.message}", markup=False)
    if error.original_error:
        console.print(f"  Cause: {error.original_error}", markup=False)
    console.print(
        "\n[dim]Hint: Check that your kubeconfig is valid and the cluster is reachable.[/dim]"
    )
    raise typer.Exit(1)


@app.command()
def main(
    kubeconfig: Annotated[
        str | None,
        typer.Option(
            "--kubeconfig",
            help="Path to the kubeconfig file "
            f"(default: $KMON_KUBECONFIG or {default_kubeconfig_path() or 'in-cluster'})",
            show_default=False,
        ),
    ] = None,
    context: Annotated[
        str | None,
        typer.Option(
            "--context",
            help="Kubeconfig context to use (default: $KMON_CONTEXT or current context)",
        ),
    ] = None,
    namespace: Annotated[
        str,
        typer.Option("--namespace", "-n", help="Namespace to list resources in"),
    ] = DEFAULT_NAMESPACE,
    resource: Annotated[
        str,
        typer.Option(
            "--resource",
            "-r",
            help="Resource to list: pods, deployments, services, configmaps, secrets, nodes",
        ),
    ] = DEFAULT_RESOURCE.value,
    watch: Annotated[
        bool,
        typer.Option("--watch", "-w", help="Refresh the listing every interval"),
    ] = False,
    interval: Annotated[
        int,
        typer.Option("--interval", "-i", min=1, help="Seconds between refreshes in watch mode"),
    ] = DEFAULT_INTERVAL_SECONDS,
    output: Annotated[
        OutputFormat,
        typer.Option(
            "--output",
            "-o",
            help="Output format: table, json, or yaml",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug mode."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """List Kubernetes resources, once or continuously.

    Examples:
        kmon
        kmon -r pods -n kube-system
        kmon -r nodes --watch --interval 3
        kmon -r service -o json
    """
    configure_logging(verbose=verbose, debug=debug)

    try:
        kind = ResourceKind.parse(resource)
    except ValueError:
        console.print(f"Unsupported resource type: {resource}", markup=False)
        raise typer.Exit(1) from None

    config = RefreshConfig(
        resource=kind,
        namespace=namespace,
        watch=watch,
        interval=interval,
        output_format=output.value,
    )

    try:
        client = KubernetesClient(
            KubernetesConnectionConfig.from_env(kubeconfig=kubeconfig, context=context)
        )
    except KubernetesConnectionError as e:
        handle_connection_error(e)

    with client:
        loop = RefreshLoop(config, ResourceManager(client), get_formatter(output, console))
        try:
            loop.run()
        except KeyboardInterrupt:
            raise typer.Exit(EXIT_INTERRUPTED) from None


if __name__ == "__main__":
    app()
