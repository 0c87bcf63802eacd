"""Smoke script for the expenses endpoint.

Sequence:
 1. List seeded expenses.
 2. Create a valid expense.
 3. Submit an invalid payload (expect 400 with details).
 4. Send a preflight OPTIONS and an unsupported DELETE.
 5. List again (new expense first by date).
"""

import json

from fastapi.testclient import TestClient

from expense_api.core.config import Settings
from expense_api.main import create_app


def run():
    app = create_app(settings_override=Settings())
    client = TestClient(app)

    results = {}
    results["list_seeded"] = client.get("/api/expenses").json()
    created = client.post(
        "/api/expenses",
        json={
            "amount": "50",
            "description": "  Lunch ",
            "category": "Food",
            "date": "2025-12-05",
        },
    )
    results["create_status"] = created.status_code
    results["create_body"] = created.json()
    invalid = client.post(
        "/api/expenses",
        json={"amount": "abc", "description": "", "category": "Food", "date": "2025-13-40"},
    )
    results["invalid_status"] = invalid.status_code
    results["invalid_body"] = invalid.json()
    preflight = client.options("/api/expenses")
    results["options_status"] = preflight.status_code
    results["options_headers"] = {
        k: v for k, v in preflight.headers.items() if k.startswith("access-control")
    }
    delete = client.delete("/api/expenses")
    results["delete_status"] = delete.status_code
    results["delete_body"] = delete.json()
    results["final_list"] = client.get("/api/expenses").json()
    print(json.dumps(results, indent=2))


if __name__ == "__main__":
    run()
