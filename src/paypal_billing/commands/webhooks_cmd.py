"""CLI commands for webhook management."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from paypal_billing.client import PayPalClient
from paypal_billing.config import get_settings
from paypal_billing.errors import PayPalError
from paypal_billing.models.webhooks import AnchorType, CreateWebhookRequest, EventType
from paypal_billing.services.webhooks import WebhookService
from paypal_billing.utils.errors import handle_error
from paypal_billing.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="webhooks", help="Manage webhook subscriptions.")


def _build_client(verbose: bool = False) -> tuple[PayPalClient, WebhookService]:
    try:
        client = PayPalClient.from_settings(get_settings(), verbose=verbose)
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    return client, WebhookService(client)


def _webhook_row(webhook) -> dict[str, str]:
    return {
        "id": webhook.id or "",
        "url": webhook.url or "",
        "event_types": ", ".join(e.name for e in webhook.event_types),
    }


@app.command("create")
def create_webhook(
    url: Annotated[str, typer.Option("--url", "-u", help="HTTPS listener URL")] = ...,
    event_types: Annotated[list[str], typer.Option("--event-type", "-e", help="Event name(s), e.g. BILLING.SUBSCRIPTION.CREATED or *")] = ...,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show what would be sent without executing")] = False,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Subscribe a listener URL to webhook events."""
    request = CreateWebhookRequest(url=url, event_types=[EventType(name=name) for name in event_types])
    if dry_run:
        console.print("[yellow]DRY RUN:[/yellow] Would create webhook:")
        print_output(request, output, title="Webhook [DRY RUN]")
        return

    client, service = _build_client(verbose)
    try:
        webhook = service.create(request)
        if output == OutputFormat.JSON:
            print_output(webhook, output)
        else:
            print_output(_webhook_row(webhook), output, title="Webhook Created")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("list")
def list_webhooks(
    anchor_type: Annotated[AnchorType, typer.Option("--anchor-type", "-a", help="APPLICATION or ACCOUNT")] = AnchorType.APPLICATION,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List webhooks for the app or the whole account."""
    client, service = _build_client(verbose)
    try:
        result = service.list(anchor_type)
        console.print(f"[dim]Found {len(result.webhooks)} webhooks[/dim]")
        if output == OutputFormat.JSON:
            print_output(result.webhooks, output)
        else:
            print_output([_webhook_row(w) for w in result.webhooks], output, title="Webhooks")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("delete")
def delete_webhook(
    webhook_id: Annotated[str, typer.Option("--webhook-id", "-w", help="Webhook ID to delete")] = ...,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show what would be deleted without executing")] = False,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Delete a webhook by ID."""
    if dry_run:
        console.print(f"[yellow]DRY RUN:[/yellow] Would delete webhook {webhook_id}")
        return

    client, service = _build_client(verbose)
    try:
        service.delete(webhook_id)
        print_output({"id": webhook_id, "status": "deleted"}, output, title="Webhook Deleted")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
