"""CLI tests for events command group."""
import json

from typer.testing import CliRunner

from paypal_billing.commands.events_cmd import app, summarize
from paypal_billing.models.events import parse_event

runner = CliRunner()

SALE_EVENT = {
    "id": "WH-2WR32451HC0233532-67976317FL4543714",
    "resource_type": "sale",
    "event_type": "PAYMENT.SALE.COMPLETED",
    "summary": "A successful sale payment was made for $ 0.48 USD",
    "resource": {"id": "80021663DE681814L", "state": "completed", "billing_agreement_id": "I-BW452GLLEP1G"},
}


def test_summarize_sale():
    row = summarize(parse_event(SALE_EVENT))
    assert row["resource_id"] == "80021663DE681814L"
    assert row["resource_state"] == "completed"
    assert row["billing_agreement_id"] == "I-BW452GLLEP1G"


def test_summarize_subscription():
    event = parse_event({
        "id": "WH-1", "resource_type": "subscription", "event_type": "BILLING.SUBSCRIPTION.CANCELLED",
        "resource": {"id": "I-1", "status": "CANCELLED"},
    })
    row = summarize(event)
    assert row["resource_id"] == "I-1"
    assert row["resource_state"] == "CANCELLED"


def test_summarize_unknown_resource():
    row = summarize(parse_event({"id": "WH-2", "resource_type": "plan", "resource": {"id": "P-1"}}))
    assert row["resource_id"] == "P-1"
    assert row["resource_state"] is None


def test_parse_command_json(tmp_path):
    path = tmp_path / "event.json"
    path.write_text(json.dumps(SALE_EVENT))
    result = runner.invoke(app, ["parse", "--file", str(path), "--output", "json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["resource"]["billing_agreement_id"] == "I-BW452GLLEP1G"


def test_parse_command_table(tmp_path):
    path = tmp_path / "event.json"
    path.write_text(json.dumps(SALE_EVENT))
    result = runner.invoke(app, ["parse", "-f", str(path)])
    assert result.exit_code == 0


def test_parse_command_invalid(tmp_path):
    path = tmp_path / "event.json"
    path.write_text("not json")
    result = runner.invoke(app, ["parse", "-f", str(path)])
    assert result.exit_code == 1
    assert json.loads(result.stdout)["code"] == "DECODE_ERROR"


def test_parse_command_missing_file(tmp_path):
    result = runner.invoke(app, ["parse", "-f", str(tmp_path / "nope.json")])
    assert result.exit_code != 0


def test_parse_through_main_app(tmp_path):
    from paypal_billing.main import app as main_app

    path = tmp_path / "event.json"
    path.write_text(json.dumps(SALE_EVENT))
    result = runner.invoke(main_app, ["events", "parse", "-f", str(path), "--output", "json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["id"] == SALE_EVENT["id"]
