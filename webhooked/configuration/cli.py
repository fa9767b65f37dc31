"""Defines the Command Line Interface (CLI) using Typer."""

import structlog
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from webhooked.configuration.exceptions import InvalidConfigurationError, RequiredConfigurationElementError
from webhooked.configuration.models import HookContentType
from webhooked.configuration.reconcile import reconcile_webhooked_configuration
from webhooked.synchronize.driver import run_monitor_workflow, run_reconcile_hooks_workflow
from webhooked.synchronize.exceptions import HookReconciliationError
from webhooked.utils.constants import ALL_EVENTS, DEFAULT_GITHUB_API_URL
from webhooked.utils.log import configure_logging

load_dotenv()

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

typer_app = typer.Typer(pretty_exceptions_show_locals=False, add_completion=False)


@typer_app.command()
def webhooked_cli(
    ctx: typer.Context,
    token: Annotated[str | None, Option(envvar="TOKEN", help="GitHub access token.")] = None,
    url: Annotated[str | None, Option(envvar="URL", help="URL of hook to install.")] = None,
    owner: Annotated[str, Option(envvar="OWNER", help="User/org whose repositories should be scanned ('' for current user).")] = "",
    content_type: Annotated[
        HookContentType,
        Option(envvar="CONTENT_TYPE", case_sensitive=False, help="Media type the hook accepts ('json' or 'form')."),
    ] = HookContentType.JSON,
    secret: Annotated[str, Option(envvar="SECRET", help="Secret key to use for hook validation.")] = "",
    events: Annotated[str, Option(envvar="EVENTS", help="Comma-separated list of events to receive ('*' for all).")] = ALL_EVENTS,
    monitor: Annotated[
        str,
        Option(
            envvar="MONITOR",
            help="If at least 1m, do not exit and instead monitor for changes at this interval (e.g. 5m, 1h30m).",
        ),
    ] = "0",
    github_api_url: Annotated[str, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = DEFAULT_GITHUB_API_URL,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Ensure a webhook is installed and up to date on every repository owned by a user or organization."""
    configure_logging(debug)
    try:
        config = reconcile_webhooked_configuration(
            cli_debug=debug,
            cli_github_api_url=github_api_url,
            cli_github_pat_token=token,
            cli_owner=owner,
            cli_url=url,
            cli_content_type=content_type,
            cli_secret=secret,
            cli_events=events,
            cli_monitor=monitor,
        )
    except RequiredConfigurationElementError as exc:
        typer.echo(ctx.get_help())
        typer.echo(str(exc), err=True)
        raise typer.Exit(0) from exc
    except InvalidConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        if config.monitor_mode:
            run_monitor_workflow(config)
        else:
            result = run_reconcile_hooks_workflow(config)
            typer.echo(result.summary())
    except HookReconciliationError as exc:
        logger.error(
            "Sweep aborted",
            phase=exc.phase.value,
            repository=exc.repository.full_name if exc.repository else None,
            error=str(exc),
        )
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc
    except KeyboardInterrupt as exc:
        typer.echo("Interrupted", err=True)
        raise typer.Exit(130) from exc


if __name__ == "__main__":
    typer_app()
