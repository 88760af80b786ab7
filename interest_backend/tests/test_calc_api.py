from __future__ import annotations

from math import isclose

from flask.testing import FlaskClient


def test_simple_calculation(client: FlaskClient, form: dict):
    resp = client.post("/api/calc/simple", json=form)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["result"]["kind"] == "simple"
    assert isclose(body["result"]["interest"], 100_000.0)
    assert isclose(body["result"]["total"], 1_100_000.0)
    assert body["comparison"] is None
    assert body["formatted"]["total"] == "Rp 1.100.000"
    assert body["formatted"]["simple_total"] is None


def test_compound_calculation_includes_comparison(client: FlaskClient, form: dict):
    resp = client.post("/api/calc/compound", json=form)

    assert resp.status_code == 200
    body = resp.get_json()
    result = body["result"]
    assert result["kind"] == "compound"
    assert result["compounding_frequency_per_year"] == 12
    assert isclose(result["total"], 1_104_941.34, abs_tol=0.01)

    comparison = body["comparison"]
    assert isclose(comparison["simple_total"], 1_100_000.0)
    assert isclose(comparison["difference"], result["total"] - 1_100_000.0)
    assert body["formatted"]["total"] == "Rp 1.104.941"
    assert body["formatted"]["difference"] == "Rp 4.941"


def test_numeric_json_values_are_accepted(client: FlaskClient):
    resp = client.post(
        "/api/calc/compound",
        json={"principal": 1000, "annualRatePercent": 10, "timeYears": 1, "compoundingFrequencyPerYear": 1},
    )

    assert resp.status_code == 200
    assert isclose(resp.get_json()["result"]["total"], 1100.0)


def test_validation_error_returns_400(client: FlaskClient, form: dict):
    form["principal"] = ""

    resp = client.post("/api/calc/simple", json=form)

    assert resp.status_code == 400
    assert resp.get_json() == {
        "error": {
            "kind": "missing_field",
            "message": "All fields must be filled in.",
            "field": "principal",
        }
    }


def test_zero_frequency_is_rejected(client: FlaskClient, form: dict):
    form["compoundingFrequencyPerYear"] = 0

    resp = client.post("/api/calc/compound", json=form)

    assert resp.status_code == 400
    assert resp.get_json()["error"]["kind"] == "invalid_frequency"


def test_out_of_range_rate(client: FlaskClient, form: dict):
    form["annualRatePercent"] = "100.0001"

    resp = client.post("/api/calc/simple", json=form)

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"]["kind"] == "out_of_range"
    assert body["error"]["field"] == "annualRatePercent"


def test_unknown_mode_returns_404(client: FlaskClient, form: dict):
    resp = client.post("/api/calc/continuous", json=form)

    assert resp.status_code == 404
    assert resp.get_json()["error"]["kind"] == "unknown_mode"


def test_malformed_payload_returns_422(client: FlaskClient):
    resp = client.post("/api/calc/simple", json=["1000", "5", "2"])

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_unexpected_field_returns_422(client: FlaskClient, form: dict):
    form["currency"] = "USD"

    resp = client.post("/api/calc/simple", json=form)

    assert resp.status_code == 422


def test_modes_endpoint(client: FlaskClient):
    resp = client.get("/api/modes")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["default_frequency"] == 12
    assert [mode["mode"] for mode in body["modes"]] == ["simple", "compound"]
    assert all(mode["formula"] for mode in body["modes"])


def test_cors_headers_for_allowed_origin(client: FlaskClient, form: dict):
    resp = client.post(
        "/api/calc/simple",
        json=form,
        headers={"Origin": "http://localhost:5173"},
    )

    assert resp.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"


def test_boolean_principal_is_not_a_number(client: FlaskClient, form: dict):
    form["principal"] = True

    resp = client.post("/api/calc/simple", json=form)

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"]["kind"] == "not_a_number"
    assert body["error"]["field"] == "principal"


def test_simple_mode_ignores_zero_frequency(client: FlaskClient, form: dict):
    form["compoundingFrequencyPerYear"] = 0

    resp = client.post("/api/calc/simple", json=form)

    assert resp.status_code == 200
    result = resp.get_json()["result"]
    assert isclose(result["interest"], 100_000.0)
    assert "compounding_frequency_per_year" not in result
