"""CLI tests for webhooks command group."""
import json
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from paypal_billing.commands.webhooks_cmd import app
from paypal_billing.errors import ProviderError, TransportError
from paypal_billing.models.webhooks import AnchorType, Webhook, WebhookList

runner = CliRunner()


def _invoke(svc, args):
    with patch("paypal_billing.commands.webhooks_cmd._build_client", return_value=(MagicMock(), svc)):
        return runner.invoke(app, args)


def _webhook(**kwargs):
    data = {
        "id": "0EH40505U7160970P",
        "url": "https://example.com/example_webhook",
        "event_types": [{"name": "PAYMENT.SALE.COMPLETED"}, {"name": "PAYMENT.SALE.REFUNDED"}],
    }
    data.update(kwargs)
    return Webhook.model_validate(data)


def test_create_dry_run():
    svc = MagicMock()
    result = _invoke(svc, [
        "create", "--url", "https://example.com/hook",
        "-e", "BILLING.SUBSCRIPTION.CREATED", "-e", "PAYMENT.SALE.COMPLETED",
        "--dry-run", "--output", "json",
    ])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "url": "https://example.com/hook",
        "event_types": [{"name": "BILLING.SUBSCRIPTION.CREATED"}, {"name": "PAYMENT.SALE.COMPLETED"}],
    }
    svc.create.assert_not_called()


def test_create_table_output():
    svc = MagicMock()
    svc.create.return_value = _webhook()
    result = _invoke(svc, ["create", "--url", "https://example.com/example_webhook", "-e", "PAYMENT.SALE.COMPLETED"])
    assert result.exit_code == 0
    request = svc.create.call_args[0][0]
    assert [e.name for e in request.event_types] == ["PAYMENT.SALE.COMPLETED"]


def test_list_json():
    svc = MagicMock()
    svc.list.return_value = WebhookList(webhooks=[_webhook()])
    result = _invoke(svc, ["list", "--anchor-type", "ACCOUNT", "--output", "json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)[0]["id"] == "0EH40505U7160970P"
    svc.list.assert_called_once_with(AnchorType.ACCOUNT)


def test_list_default_anchor():
    svc = MagicMock()
    svc.list.return_value = WebhookList()
    result = _invoke(svc, ["list"])
    assert result.exit_code == 0
    svc.list.assert_called_once_with(AnchorType.APPLICATION)


def test_list_connection_error():
    svc = MagicMock()
    svc.list.side_effect = TransportError("connection refused")
    result = _invoke(svc, ["list"])
    assert result.exit_code == 1
    assert json.loads(result.stdout)["code"] == "CONNECTION_ERROR"


def test_delete():
    svc = MagicMock()
    result = _invoke(svc, ["delete", "--webhook-id", "5GP028458E2496506", "--output", "json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"id": "5GP028458E2496506", "status": "deleted"}
    svc.delete.assert_called_once_with("5GP028458E2496506")


def test_delete_dry_run():
    svc = MagicMock()
    result = _invoke(svc, ["delete", "-w", "5GP028458E2496506", "--dry-run"])
    assert result.exit_code == 0
    svc.delete.assert_not_called()


def test_delete_not_found():
    svc = MagicMock()
    response = MagicMock(status_code=404, reason_phrase="Not Found")
    svc.delete.side_effect = ProviderError(response, name="INVALID_RESOURCE_ID", debug_id="f2a1b3c4")
    result = _invoke(svc, ["delete", "-w", "WH-missing"])
    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data["code"] == "NOT_FOUND"
    assert data["debug_id"] == "f2a1b3c4"
