"""CLI commands for authentication management."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from paypal_billing.client import PayPalClient
from paypal_billing.config import get_settings
from paypal_billing.errors import PayPalError
from paypal_billing.utils.errors import handle_error
from paypal_billing.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="auth", help="Manage OAuth2 access tokens.")


@app.command()
def token(
    show_token: Annotated[bool, typer.Option("--show-token", help="Include the raw access token in the output")] = False,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Request a client-credentials token and display its expiry."""
    settings = get_settings()
    try:
        client = PayPalClient.from_settings(settings, verbose=verbose)
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)

    try:
        console.print(f"Requesting token from [bold]{client.api_base}[/bold]...", style="yellow")
        access_token = client.get_access_token(force_refresh=True)
        status = client.token_status()
        result = {
            "status": "authenticated",
            "expires_at": str(status.expires_at),
            "seconds_remaining": status.seconds_remaining,
        }
        if show_token:
            result["access_token"] = access_token
        print_output(result, output, title="Access Token")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command()
def status(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """Show the configured environment and whether credentials are present."""
    settings = get_settings()
    try:
        base_url = settings.base_url
    except ValueError as e:
        handle_error(e)
        raise typer.Exit(1)

    result = {
        "environment": settings.environment,
        "api_base": base_url,
        "client_id_set": bool(settings.client_id),
        "client_secret_set": bool(settings.client_secret),
        "trace_file": settings.trace_file or "N/A",
    }
    print_output(result, output, title="Configuration")
