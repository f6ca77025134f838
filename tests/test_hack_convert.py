import pytest

from fixer_client import ValidationError, hack_convert


def test_cross_rate_through_snapshot_base(fixer, transport, snapshot):
    out = fixer.hack_convert(snapshot, "EUR", "USD", 10)

    rate = 1.636492 / 1.196476
    assert out["info"]["rate"] == rate
    assert out["info"]["rate"] == pytest.approx(1.36776, rel=1e-6)
    assert out["result"] == rate * 10
    assert out["result"] == pytest.approx(13.6776, rel=1e-6)
    assert transport.calls == []


def test_result_mirrors_convert_response(snapshot):
    out = hack_convert(snapshot, "EUR", "CAD", 2)
    assert out["success"] is True
    assert out["query"] == {"from": "EUR", "to": "CAD", "amount": 2}
    assert out["info"]["timestamp"] == 1387929599
    assert out["historical"] is True
    assert out["date"] == "2013-12-24"


def test_default_amount_is_one(snapshot):
    out = hack_convert(snapshot, "USD", "CAD")
    assert out["query"]["amount"] == 1
    assert out["result"] == out["info"]["rate"]


def test_historical_defaults_to_false(snapshot):
    del snapshot["historical"]
    assert hack_convert(snapshot, "USD", "EUR")["historical"] is False


def test_same_currency_gives_unit_rate(snapshot):
    out = hack_convert(snapshot, "USD", "USD", 7)
    assert out["info"]["rate"] == 1.0
    assert out["result"] == 7.0


@pytest.mark.parametrize("from_,to", [("JPY", "USD"), ("USD", "JPY")])
def test_missing_currency_rejected(snapshot, from_, to):
    with pytest.raises(ValidationError):
        hack_convert(snapshot, from_, to, 10)


def test_zero_rate_rejected(snapshot):
    snapshot["rates"]["EUR"] = 0
    with pytest.raises(ValidationError):
        hack_convert(snapshot, "EUR", "USD")


def test_failed_lookup_rejected_regardless_of_rates(snapshot):
    snapshot["success"] = False
    with pytest.raises(ValidationError):
        hack_convert(snapshot, "EUR", "USD")
    with pytest.raises(ValidationError):
        hack_convert({"rates": snapshot["rates"]}, "EUR", "USD")


def test_snapshot_without_rates_rejected():
    with pytest.raises(ValidationError):
        hack_convert({"success": True}, "EUR", "USD")


def test_repeat_calls_are_identical(snapshot):
    first = hack_convert(snapshot, "CAD", "EUR", 123.45)
    second = hack_convert(snapshot, "CAD", "EUR", 123.45)
    assert first == second
    assert first["result"].hex() == second["result"].hex()


def test_snapshot_not_mutated(snapshot):
    before = repr(snapshot)
    hack_convert(snapshot, "EUR", "USD", 10)
    assert repr(snapshot) == before


@pytest.mark.parametrize("bad", ["1.5", [1.5], True])
def test_non_numeric_rate_rejected(snapshot, bad):
    snapshot["rates"]["USD"] = bad
    with pytest.raises(ValidationError):
        hack_convert(snapshot, "EUR", "USD")
    with pytest.raises(ValidationError):
        hack_convert(snapshot, "USD", "EUR")
