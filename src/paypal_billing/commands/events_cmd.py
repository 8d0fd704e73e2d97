"""CLI commands for inspecting webhook event payloads."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from paypal_billing.errors import DecodeError
from paypal_billing.models.events import WebhookEvent, parse_event
from paypal_billing.utils.errors import handle_error
from paypal_billing.utils.output import OutputFormat, print_output

app = typer.Typer(name="events", help="Inspect webhook event payloads.")


def summarize(event: WebhookEvent) -> dict[str, str | None]:
    """Flatten an event into one row, pulling key fields from its resource."""
    row = {
        "id": event.id,
        "event_type": event.event_type,
        "resource_type": event.resource_type,
        "summary": event.summary,
        "resource_id": None,
        "resource_state": None,
    }
    subscription = event.subscription()
    sale = event.sale()
    if subscription is not None:
        row["resource_id"] = subscription.id
        row["resource_state"] = subscription.status.value if subscription.status else None
    elif sale is not None:
        row["resource_id"] = sale.id
        row["resource_state"] = sale.state
        row["billing_agreement_id"] = sale.billing_agreement_id
    elif isinstance(event.resource, dict):
        row["resource_id"] = event.resource.get("id")
    return row


@app.callback()
def events() -> None:
    """Inspect webhook event payloads."""


@app.command("parse")
def parse(
    file: Annotated[Path, typer.Option("--file", "-f", help="File holding a webhook JSON body", exists=True, dir_okay=False)] = ...,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
) -> None:
    """Decode a webhook notification body and show what it refers to."""
    try:
        event = parse_event(file.read_bytes())
    except DecodeError as e:
        handle_error(e)
        raise typer.Exit(1)

    if output == OutputFormat.JSON:
        print_output(event, output)
    else:
        print_output(summarize(event), output, title="Webhook Event")
