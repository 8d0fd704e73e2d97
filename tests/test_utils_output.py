"""Tests for utils/output.py — model conversion and JSON/table routing."""
import json

from paypal_billing.models.common import Money
from paypal_billing.models.patch import Patch, PatchOp
from paypal_billing.models.subscriptions import Subscription, SubscriptionStatus
from paypal_billing.utils.output import OutputFormat, _cell, print_json, print_output, to_data


# ── to_data ──────────────────────────────────────────────────────────

def test_to_data_drops_none_fields():
    sub = Subscription(id="I-1", status=SubscriptionStatus.ACTIVE)
    data = to_data(sub)
    assert data == {"id": "I-1", "status": "ACTIVE", "links": []}
    assert "plan_id" not in data


def test_to_data_uses_aliases():
    assert to_data([Patch(op=PatchOp.MOVE, path="/b", from_="/a")]) == [{"op": "move", "path": "/b", "from": "/a"}]


def test_to_data_passthrough():
    assert to_data({"a": 1}) == {"a": 1}


# ── print_json / print_output ────────────────────────────────────────

def test_print_json_dict(capsys):
    print_json({"key": "value"})
    assert json.loads(capsys.readouterr().out) == {"key": "value"}


def test_print_json_empty(capsys):
    print_json([])
    assert json.loads(capsys.readouterr().out) == []


def test_print_output_json_model(capsys):
    print_output(Money(currency_code="USD", value="10.00"), OutputFormat.JSON)
    assert json.loads(capsys.readouterr().out) == {"currency_code": "USD", "value": "10.00"}


def test_print_output_table_goes_to_stderr(capsys):
    print_output([{"id": "I-1", "status": "ACTIVE"}], OutputFormat.TABLE, columns=["id"], title="Subs")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "I-1" in captured.err


def test_print_output_table_empty(capsys):
    print_output([], OutputFormat.TABLE)
    assert "No results" in capsys.readouterr().err


# ── _cell ────────────────────────────────────────────────────────────

def test_cell_formats():
    assert _cell(None) == ""
    assert _cell({"value": "1.00"}) == '{"value": "1.00"}'
    assert _cell(3) == "3"
