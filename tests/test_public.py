# This project was developed with assistance from AI tools.
"""Tests for the public calculator API, health check and error responses."""

import pytest

PREFIX = "/api/public"


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()


def test_health(client):
    response = client.get("/health/")
    assert response.status_code == 200
    services = {s["name"]: s for s in response.json()}
    assert services["API"]["status"] == "healthy"
    assert services["Calculators"]["detail"] == "7 registered"


class TestCatalog:
    def test_list(self, client):
        response = client.get(f"{PREFIX}/calculators")
        assert response.status_code == 200
        ids = [calc["id"] for calc in response.json()]
        assert ids == [
            "affordability",
            "purchase",
            "refinance",
            "rent-vs-buy",
            "va-purchase",
            "va-refinance",
            "dscr",
        ]

    def test_detail(self, client):
        response = client.get(f"{PREFIX}/calculators/refinance")
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Refinance Calculator"
        fields = {f["name"]: f for f in data["inputs"]}
        assert fields["closingCosts"]["max"] == 100_000
        assert fields["newTerm"]["default_value"] == 30

    def test_unknown_calculator(self, client):
        """should return RFC 7807 Problem Details for an unknown id"""
        response = client.get(f"{PREFIX}/calculators/reverse-mortgage")
        assert response.status_code == 404
        body = response.json()
        assert body["status"] == 404
        assert body["title"] == "Not Found"
        assert "reverse-mortgage" in body["detail"]
        assert body["request_id"]


class TestCalculate:
    def test_purchase(self, client, purchase_inputs):
        response = client.post(f"{PREFIX}/calculators/purchase/calculate", json=purchase_inputs)
        assert response.status_code == 200
        data = response.json()
        assert data["calculator_id"] == "purchase"
        results = {r["label"]: r for r in data["results"]}
        assert results["Principal & Interest"]["value"] == pytest.approx(1516.96, abs=0.01)
        assert results["Principal & Interest"]["kind"] == "metric"
        assert results["Principal & Interest"]["format"] == "currency"

    @pytest.mark.parametrize(
        "calculator_id,fixture,count",
        [
            ("affordability", "affordability_inputs", 6),
            ("purchase", "purchase_inputs", 10),
            ("refinance", "refinance_inputs", 10),
            ("rent-vs-buy", "rent_vs_buy_inputs", 12),
            ("va-purchase", "va_purchase_inputs", 11),
            ("va-refinance", "va_refinance_inputs", 12),
            ("dscr", "dscr_inputs", 14),
        ],
    )
    def test_every_calculator(self, client, request, calculator_id, fixture, count):
        inputs = request.getfixturevalue(fixture)
        response = client.post(f"{PREFIX}/calculators/{calculator_id}/calculate", json=inputs)
        assert response.status_code == 200
        assert len(response.json()["results"]) == count

    def test_verdict_entry(self, client, rent_vs_buy_inputs):
        response = client.post(
            f"{PREFIX}/calculators/rent-vs-buy/calculate", json=rent_vs_buy_inputs
        )
        results = {r["label"]: r for r in response.json()["results"]}
        recommendation = results["Recommendation"]
        assert recommendation["kind"] == "verdict"
        assert recommendation["verdict"] in {"buy", "rent", "equal"}
        assert "value" not in recommendation

    def test_never_breaks_even_serializes_null(self, client, refinance_inputs):
        """should send an unreachable break-even as JSON null"""
        response = client.post(f"{PREFIX}/calculators/refinance/calculate", json={
            **refinance_inputs,
            "currentRate": 5.0,
            "newRate": 5.0,
            "newTerm": 1,
        })
        assert response.status_code == 200
        results = {r["label"]: r for r in response.json()["results"]}
        assert results["Break-Even Point"]["value"] is None

    def test_field_errors(self, client, affordability_inputs):
        """should return 422 listing every failing field"""
        response = client.post(f"{PREFIX}/calculators/affordability/calculate", json={
            **affordability_inputs,
            "annualIncome": -1,
            "interestRate": 25,
        })
        assert response.status_code == 422
        body = response.json()
        assert body["status"] == 422
        assert body["errors"] == {
            "annualIncome": "Income must be positive",
            "interestRate": "Interest rate must be between 0% and 20%",
        }

    def test_down_payment_over_price(self, client, purchase_inputs):
        response = client.post(f"{PREFIX}/calculators/purchase/calculate", json={
            **purchase_inputs,
            "downPayment": 400000,
        })
        assert response.status_code == 422
        body = response.json()
        assert "exceed" in body["detail"]
        assert body["errors"] == {}

    def test_boolean_field_rejected(self, client, affordability_inputs):
        response = client.post(f"{PREFIX}/calculators/affordability/calculate", json={
            **affordability_inputs,
            "annualIncome": True,
        })
        assert response.status_code == 422
        assert response.json()["errors"] == {"annualIncome": "Annual income must be a number"}

    def test_body_must_be_object(self, client):
        response = client.post(f"{PREFIX}/calculators/purchase/calculate", json=[1, 2])
        assert response.status_code == 422
        assert response.json()["title"] == "Unprocessable Entity"

    def test_unknown_calculator(self, client, purchase_inputs):
        response = client.post(f"{PREFIX}/calculators/reverse-mortgage/calculate", json=purchase_inputs)
        assert response.status_code == 404

    def test_wrong_method(self, client):
        response = client.get(f"{PREFIX}/calculators/purchase/calculate")
        assert response.status_code == 405
        assert response.json()["status"] == 405


class TestValidate:
    def test_success_echoes_camel_case(self, client, purchase_inputs):
        response = client.post(f"{PREFIX}/calculators/purchase/validate", json=purchase_inputs)
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["homePrice"] == 300000
        assert body["data"]["loanTerm"] == 30
        assert body["errors"] == {}

    def test_failure_is_still_200(self, client, purchase_inputs):
        """should report invalid input in the body rather than as an HTTP error"""
        response = client.post(f"{PREFIX}/calculators/purchase/validate", json={
            **purchase_inputs,
            "downPayment": 400000,
        })
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["data"] is None
        assert body["errors"] == {"downPayment": "Down payment cannot exceed home price"}

    def test_missing_fields(self, client):
        response = client.post(f"{PREFIX}/calculators/dscr/validate", json={"propertyPrice": 1})
        body = response.json()
        assert body["success"] is False
        assert body["errors"]["propertyPrice"] == "Property price must be at least $1,000"
        assert body["errors"]["monthlyRent"] == "Monthly rent is required"
