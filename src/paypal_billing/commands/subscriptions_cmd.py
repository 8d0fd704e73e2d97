"""CLI commands for subscription management."""

from __future__ import annotations

import json
from typing import Annotated, Any

import typer
from rich.console import Console

from paypal_billing.client import PayPalClient
from paypal_billing.config import get_settings
from paypal_billing.errors import PayPalError
from paypal_billing.models.common import ApplicationContext, Name, Subscriber
from paypal_billing.models.patch import PatchBuilder, PatchOp
from paypal_billing.models.subscriptions import CreateSubscriptionRequest
from paypal_billing.services.subscriptions import SubscriptionService
from paypal_billing.utils.errors import handle_error
from paypal_billing.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="subscriptions", help="Manage billing subscriptions.")

SUBSCRIPTION_COLUMNS = ["id", "plan_id", "status", "start_time", "create_time"]
TRANSACTION_COLUMNS = ["id", "status", "payer_email", "amount_with_breakdown", "time"]


def _build_client(verbose: bool = False) -> tuple[PayPalClient, SubscriptionService]:
    try:
        client = PayPalClient.from_settings(get_settings(), verbose=verbose)
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    return client, SubscriptionService(client)


def _parse_value(raw: str | None) -> Any:
    """Interpret a CLI patch value as JSON, falling back to the plain string."""
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@app.command("create")
def create_subscription(
    plan_id: Annotated[str, typer.Option("--plan-id", "-p", help="Billing plan ID (P-...)")] = ...,
    quantity: Annotated[str | None, typer.Option("--quantity", "-q", help="Quantity of the product")] = None,
    start_time: Annotated[str | None, typer.Option("--start-time", help="ISO-8601 start time (default: now)")] = None,
    email: Annotated[str | None, typer.Option("--email", help="Subscriber email address")] = None,
    given_name: Annotated[str | None, typer.Option("--given-name", help="Subscriber given name")] = None,
    surname: Annotated[str | None, typer.Option("--surname", help="Subscriber surname")] = None,
    return_url: Annotated[str | None, typer.Option("--return-url", help="Where PayPal sends the buyer after approval")] = None,
    cancel_url: Annotated[str | None, typer.Option("--cancel-url", help="Where PayPal sends the buyer on cancel")] = None,
    brand_name: Annotated[str | None, typer.Option("--brand-name", help="Brand shown on the PayPal approval page")] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show what would be sent without executing")] = False,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Create a subscription for a billing plan."""
    try:
        subscriber = None
        if email or given_name or surname:
            name = Name(given_name=given_name, surname=surname) if given_name or surname else None
            subscriber = Subscriber(email_address=email, name=name)

        context = None
        if return_url and cancel_url:
            context = ApplicationContext(brand_name=brand_name, return_url=return_url, cancel_url=cancel_url)
        elif return_url or cancel_url:
            raise typer.BadParameter("--return-url and --cancel-url must be given together")

        request = CreateSubscriptionRequest(
            plan_id=plan_id,
            quantity=quantity,
            start_time=start_time,
            subscriber=subscriber,
            application_context=context,
        )
    except ValueError as e:
        handle_error(e)
        raise typer.Exit(1)

    if dry_run:
        console.print("[yellow]DRY RUN:[/yellow] Would create subscription:")
        print_output(request, output, title="Subscription [DRY RUN]")
        return

    client, service = _build_client(verbose)
    try:
        subscription = service.create(request)
        approve = subscription.approve_link()
        if approve:
            console.print(f"[dim]Buyer approval URL: {approve}[/dim]")
        print_output(subscription, output, columns=SUBSCRIPTION_COLUMNS, title="Subscription Created")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("show")
def show_subscription(
    subscription_id: Annotated[str, typer.Option("--subscription-id", "-s", help="Subscription ID (I-...)")] = ...,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show subscription details."""
    client, service = _build_client(verbose)
    try:
        subscription = service.show(subscription_id)
        print_output(subscription, output, columns=SUBSCRIPTION_COLUMNS, title=f"Subscription {subscription_id}")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("update")
def update_subscription(
    subscription_id: Annotated[str, typer.Option("--subscription-id", "-s")] = ...,
    path: Annotated[str, typer.Option("--path", help="JSON pointer, e.g. /shipping_amount")] = ...,
    op: Annotated[PatchOp, typer.Option("--op", help="Patch operation")] = PatchOp.REPLACE,
    value: Annotated[str | None, typer.Option("--value", help="New value (JSON or plain string)")] = None,
    from_path: Annotated[str | None, typer.Option("--from", help="Source pointer for move/copy")] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show the patch document without sending it")] = False,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Apply a single JSON-Patch operation to a subscription."""
    try:
        builder = PatchBuilder()
        if op in (PatchOp.MOVE, PatchOp.COPY):
            getattr(builder, op.value)(from_path, path)
        elif op == PatchOp.REMOVE:
            builder.remove(path)
        elif value is None:
            raise ValueError(f"--value is required for '{op.value}' (pass null to clear a field)")
        else:
            getattr(builder, op.value)(path, _parse_value(value))
        patches = builder.build()
    except ValueError as e:
        handle_error(e)
        raise typer.Exit(1)

    if dry_run:
        console.print("[yellow]DRY RUN:[/yellow] Would send patch:")
        print_output([p.to_api() for p in patches], output, title="Patch [DRY RUN]")
        return

    client, service = _build_client(verbose)
    try:
        result = service.update(subscription_id, patches)
        if result is None:
            print_output({"id": subscription_id, "status": "updated"}, output, title="Subscription Updated")
        else:
            print_output(result, output, columns=SUBSCRIPTION_COLUMNS, title="Subscription Updated")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


def _change_status(action: str, subscription_id: str, reason: str, output: OutputFormat, verbose: bool) -> None:
    client, service = _build_client(verbose)
    try:
        getattr(service, action)(subscription_id, reason)
        print_output({"id": subscription_id, "action": action, "reason": reason}, output, title=f"Subscription {action}")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("activate")
def activate_subscription(
    subscription_id: Annotated[str, typer.Option("--subscription-id", "-s")] = ...,
    reason: Annotated[str, typer.Option("--reason", help="Reason shown in PayPal's records")] = "Reactivating the subscription",
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Activate a suspended or approved subscription."""
    _change_status("activate", subscription_id, reason, output, verbose)


@app.command("suspend")
def suspend_subscription(
    subscription_id: Annotated[str, typer.Option("--subscription-id", "-s")] = ...,
    reason: Annotated[str, typer.Option("--reason")] = "Suspending the subscription",
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Suspend an active subscription."""
    _change_status("suspend", subscription_id, reason, output, verbose)


@app.command("cancel")
def cancel_subscription(
    subscription_id: Annotated[str, typer.Option("--subscription-id", "-s")] = ...,
    reason: Annotated[str, typer.Option("--reason")] = "Not satisfied with the service",
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Cancel a subscription."""
    _change_status("cancel", subscription_id, reason, output, verbose)


@app.command("transactions")
def list_transactions(
    subscription_id: Annotated[str, typer.Option("--subscription-id", "-s")] = ...,
    start_time: Annotated[str, typer.Option("--start-time", help="ISO-8601, e.g. 2024-01-01T00:00:00Z")] = ...,
    end_time: Annotated[str, typer.Option("--end-time", help="ISO-8601, e.g. 2024-02-01T00:00:00Z")] = ...,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List transactions for a subscription in a time range."""
    client, service = _build_client(verbose)
    try:
        result = service.list_transactions(subscription_id, start_time, end_time)
        console.print(f"[dim]Found {len(result.transactions)} transactions[/dim]")
        print_output(result.transactions, output, columns=TRANSACTION_COLUMNS, title=f"Transactions ({subscription_id})")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
