"""PayPal billing CLI — entry point.

Manage subscriptions and webhooks from the command line.
"""

from __future__ import annotations

import logging

import typer

from paypal_billing.commands.auth_cmd import app as auth_app
from paypal_billing.commands.events_cmd import app as events_app
from paypal_billing.commands.subscriptions_cmd import app as subscriptions_app
from paypal_billing.commands.webhooks_cmd import app as webhooks_app

app = typer.Typer(
    name="paypal-billing",
    help="CLI tool for PayPal subscriptions and webhooks.",
    no_args_is_help=True,
)

# Register command groups
app.add_typer(auth_app, name="auth")
app.add_typer(subscriptions_app, name="subscriptions")
app.add_typer(webhooks_app, name="webhooks")
app.add_typer(events_app, name="events")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """PayPal billing CLI — subscriptions, webhooks and webhook events."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


if __name__ == "__main__":
    app()
