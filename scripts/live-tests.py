#!/usr/bin/env python3
# This project was developed with assistance from AI tools.
"""Live smoke test suite for the Model Mortgage calculator API.

Exercises health, the calculator catalog, validation and calculation for
every calculator, and RFC 7807 error handling against a running server.

Prerequisites:
  - API server running (``uvicorn model_mortgage.main:app``)
  - model_mortgage installed (``pip install -e .``); responses are parsed
    with its schemas

Usage:
  ./scripts/live-tests.py                       # full suite on localhost:8000
  ./scripts/live-tests.py --base http://host:80 # another server
  ./scripts/live-tests.py --section errors      # only error handling
"""

import argparse
import asyncio
import sys

import httpx

from model_mortgage.schemas import CalculatorResult, VerdictResult
from model_mortgage.schemas.calculator import CalculationResponse
from model_mortgage.services.formatting import format_result, result_map

BASE = "http://localhost:8000"
PREFIX = "/api/public"
HEADERS = {"Origin": "http://localhost:3000"}

# ---------------------------------------------------------------------------
# Test runner
# ---------------------------------------------------------------------------

PASS = 0
FAIL = 0
ERRORS: list[str] = []
SECTION = ""


def section(name: str):
    global SECTION
    SECTION = name
    print(f"\n{'=' * 60}")
    print(f"  {name}")
    print(f"{'=' * 60}\n")


def ok(name: str, passed: bool, detail: str = ""):
    global PASS, FAIL
    if passed:
        PASS += 1
        print(f"  PASS  {name}")
    else:
        FAIL += 1
        msg = f"[{SECTION}] {name}: {detail}" if detail else f"[{SECTION}] {name}"
        ERRORS.append(msg)
        print(f"  FAIL  {name} -- {detail}")


def by_label(body: dict) -> dict[str, CalculatorResult | VerdictResult]:
    return result_map(CalculationResponse.model_validate(body).results)


SAMPLES: dict[str, dict] = {
    "affordability": {
        "annualIncome": 80000, "monthlyDebts": 500, "downPayment": 20000, "interestRate": 7.0,
    },
    "purchase": {
        "homePrice": 300000, "downPayment": 60000, "interestRate": 6.5, "loanTerm": 30,
        "propertyTaxRate": 1.2, "insurance": 1200, "hoa": 100,
    },
    "refinance": {
        "currentBalance": 250000, "currentRate": 7.5, "newRate": 6.0, "remainingTerm": 25,
        "newTerm": 30, "closingCosts": 5000,
    },
    "rent-vs-buy": {
        "homePrice": 350000, "downPayment": 70000, "interestRate": 7.0, "rentAmount": 2000,
        "yearsToStay": 7, "appreciationRate": 3.0,
    },
    "va-purchase": {
        "homePrice": 350000, "downPayment": 0, "interestRate": 6.5, "vaFundingFee": 2.15,
        "propertyTaxRate": 1.2, "insurance": 1200,
    },
    "va-refinance": {
        "currentBalance": 300000, "currentRate": 7.0, "newRate": 6.0, "cashOutAmount": 0,
        "vaFundingFee": 2.15,
    },
    "dscr": {
        "propertyPrice": 300000, "downPayment": 60000, "interestRate": 7.5,
        "monthlyRent": 2500, "monthlyExpenses": 800,
    },
}

EXPECTED_COUNTS = {
    "affordability": 6,
    "purchase": 10,
    "refinance": 10,
    "rent-vs-buy": 12,
    "va-purchase": 11,
    "va-refinance": 12,
    "dscr": 14,
}

# ---------------------------------------------------------------------------
# 1. Health
# ---------------------------------------------------------------------------


async def test_health(c: httpx.AsyncClient):
    section("Health")

    r = await c.get("/health/")
    ok("GET /health/ returns 200", r.status_code == 200)
    data = r.json()
    ok("response is a list", isinstance(data, list))
    ok("API status is healthy",
       any(s.get("name") == "API" and s.get("status") == "healthy" for s in data))

    r = await c.get("/")
    ok("GET / root returns 200", r.status_code == 200)
    ok("root has welcome message", "message" in r.json())


# ---------------------------------------------------------------------------
# 2. Catalog
# ---------------------------------------------------------------------------


async def test_catalog(c: httpx.AsyncClient):
    section("Calculator catalog")

    r = await c.get(f"{PREFIX}/calculators")
    ok("GET calculators returns 200", r.status_code == 200)
    ids = [calc.get("id") for calc in r.json()]
    ok("all calculators listed", set(ids) == set(SAMPLES), f"ids={ids}")

    r = await c.get(f"{PREFIX}/calculators/purchase")
    ok("GET purchase detail returns 200", r.status_code == 200)
    inputs = {f["name"]: f for f in r.json().get("inputs", [])}
    ok("purchase lists homePrice input", "homePrice" in inputs)
    ok("homePrice min is 1000", inputs.get("homePrice", {}).get("min") == 1000)


# ---------------------------------------------------------------------------
# 3. Calculations
# ---------------------------------------------------------------------------


async def test_calculations(c: httpx.AsyncClient):
    section("Calculations")

    for calc_id, payload in SAMPLES.items():
        r = await c.post(f"{PREFIX}/calculators/{calc_id}/calculate", json=payload)
        ok(f"{calc_id} returns 200", r.status_code == 200, r.text[:120])
        if r.status_code != 200:
            continue
        results = by_label(r.json())
        ok(f"{calc_id} result count",
           len(results) == EXPECTED_COUNTS[calc_id], f"count={len(results)}")
        for entry in results.values():
            if entry.highlight:
                print(f"        {entry.label}: {format_result(entry)}")

        r = await c.post(f"{PREFIX}/calculators/{calc_id}/validate", json=payload)
        ok(f"{calc_id} validates", r.status_code == 200 and r.json().get("success") is True)

    r = await c.post(f"{PREFIX}/calculators/purchase/calculate", json=SAMPLES["purchase"])
    results = by_label(r.json())
    pi = results["Principal & Interest"].value
    ok("purchase P&I is ~1516.96", abs(pi - 1516.96) < 0.01, f"pi={pi}")
    total = results["Total Monthly Payment"].value
    ok("purchase total is ~2016.96", abs(total - 2016.96) < 0.01, f"total={total}")

    r = await c.post(f"{PREFIX}/calculators/affordability/calculate",
                     json=SAMPLES["affordability"])
    dti = by_label(r.json())["Debt-to-Income Ratio"].value
    ok("affordability DTI is ~0.43", abs(dti - 0.43) < 0.01, f"dti={dti}")

    r = await c.post(f"{PREFIX}/calculators/rent-vs-buy/calculate", json=SAMPLES["rent-vs-buy"])
    rec = by_label(r.json())["Recommendation"]
    ok("rent-vs-buy recommendation is a verdict", isinstance(rec, VerdictResult))

    r = await c.post(f"{PREFIX}/calculators/va-purchase/calculate", json=SAMPLES["va-purchase"])
    fee = by_label(r.json())["VA Funding Fee"].value
    ok("va-purchase funding fee is 2.15% of the loan", abs(fee - 7525) < 0.01, f"fee={fee}")


# ---------------------------------------------------------------------------
# 4. Error handling
# ---------------------------------------------------------------------------


async def test_error_handling(c: httpx.AsyncClient):
    section("Error Handling (RFC 7807)")

    r = await c.get(f"{PREFIX}/calculators/mystery")
    ok("unknown calculator returns 404", r.status_code == 404)
    body = r.json()
    ok("404 has title field", "title" in body)
    ok("404 has status field", body.get("status") == 404)

    bad = {**SAMPLES["affordability"], "interestRate": 25, "annualIncome": -1}
    r = await c.post(f"{PREFIX}/calculators/affordability/calculate", json=bad)
    ok("out-of-range input returns 422", r.status_code == 422)
    errors = r.json().get("errors", {})
    ok("422 lists every failing field",
       {"interestRate", "annualIncome"} <= set(errors), f"errors={errors}")

    r = await c.post(f"{PREFIX}/calculators/affordability/validate", json=bad)
    ok("validate reports failure with 200",
       r.status_code == 200 and r.json().get("success") is False)

    too_much_down = {**SAMPLES["purchase"], "downPayment": 400000}
    r = await c.post(f"{PREFIX}/calculators/purchase/calculate", json=too_much_down)
    ok("down payment over price returns 422", r.status_code == 422)
    ok("domain error explains itself", "exceed" in r.json().get("detail", ""))

    r = await c.get(f"{PREFIX}/calculators/purchase/calculate")
    ok("405 for wrong method", r.status_code == 405)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


async def main():
    parser = argparse.ArgumentParser(description="Live test suite for the Model Mortgage API")
    parser.add_argument("--base", default=BASE, help="Server base URL")
    parser.add_argument("--section", choices=["health", "calc", "errors", "all"], default="all",
                        help="Which sections to run")
    args = parser.parse_args()

    print("=" * 60)
    print("  LIVE TEST SUITE -- Model Mortgage API")
    print("=" * 60)

    async with httpx.AsyncClient(base_url=args.base, headers=HEADERS, timeout=15) as c:

        # Pre-flight: make sure server is up
        try:
            r = await c.get("/health/")
            if r.status_code != 200:
                print(f"\n  Server returned {r.status_code} on /health/ -- is it running?")
                sys.exit(2)
        except httpx.ConnectError:
            print(f"\n  Cannot connect to server at {args.base} -- is it running?")
            sys.exit(2)

        if args.section in ("health", "all"):
            await test_health(c)
        if args.section in ("calc", "all"):
            await test_catalog(c)
            await test_calculations(c)
        if args.section in ("errors", "all"):
            await test_error_handling(c)

    # Summary
    print(f"\n{'=' * 60}")
    print(f"  RESULTS: {PASS} passed, {FAIL} failed")
    print(f"{'=' * 60}")

    if ERRORS:
        print("\nFailures:")
        for e in ERRORS:
            print(f"  - {e}")

    sys.exit(0 if FAIL == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())
