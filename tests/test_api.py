"""Tests for HTTP endpoints."""

from dataclasses import replace
from uuid import uuid4

from fastapi.testclient import TestClient

from deficiency_tracker.api.app import create_app
from deficiency_tracker.services.intake_log import IntakeLogService
from tests.conftest import UnavailableIntakeLogRepository


def orange(logged_at: str = "2024-03-01T08:00:00Z", unit: str = "mg") -> dict:
    return {
        "name": "Orange",
        "serving_size": {"value": 130, "unit": "g"},
        "nutrients": {"vitaminC": {"value": 80, "unit": unit}},
        "logged_at": logged_at,
    }


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_log_food_and_list_days(container) -> None:
    client = TestClient(create_app(container))
    profile_id = uuid4()

    first = client.post(f"/profiles/{profile_id}/foods", json=orange())
    second = client.post(f"/profiles/{profile_id}/foods", json=orange())
    days = client.get(f"/profiles/{profile_id}/days")

    assert first.status_code == 201
    assert first.json()["day"] == "2024-03-01"
    assert first.json()["daily_log_id"] == second.json()["daily_log_id"]
    assert days.status_code == 200
    assert days.json() == {
        "days": [
            {
                "day": "2024-03-01",
                "totals": {"vitaminC": {"value": 160.0, "unit": "mg"}},
            }
        ]
    }


def test_log_food_with_clashing_unit_is_rejected(container) -> None:
    client = TestClient(create_app(container))
    profile_id = uuid4()
    client.post(f"/profiles/{profile_id}/foods", json=orange())

    response = client.post(f"/profiles/{profile_id}/foods", json=orange(unit="g"))

    assert response.status_code == 422
    assert response.json()["nutrient"] == "vitaminC"
    assert response.json()["expected_unit"] == "mg"
    assert response.json()["actual_unit"] == "g"


def test_log_food_in_non_reference_unit_is_rejected(container) -> None:
    client = TestClient(create_app(container))
    profile_id = uuid4()
    payload = orange()
    payload["nutrients"] = {"vitaminC": {"value": 0.5, "unit": "g"}}

    response = client.post(f"/profiles/{profile_id}/foods", json=payload)
    analysis = client.get(f"/profiles/{profile_id}/deficiencies")

    assert response.status_code == 422
    assert response.json()["nutrient"] == "vitaminC"
    assert response.json()["expected_unit"] == "mg"
    assert analysis.status_code == 200
    assert client.get(f"/profiles/{profile_id}/days").json() == {"days": []}


def test_log_food_validates_payload(container) -> None:
    client = TestClient(create_app(container))
    payload = orange()
    payload["nutrients"] = {"unobtainium": {"value": 1, "unit": "mg"}}

    response = client.post(f"/profiles/{uuid4()}/foods", json=payload)

    assert response.status_code == 422


def test_delete_food_and_day(container) -> None:
    client = TestClient(create_app(container))
    profile_id = uuid4()
    logged = client.post(f"/profiles/{profile_id}/foods", json=orange()).json()

    deleted = client.delete(f"/profiles/{profile_id}/foods/{logged['entry_id']}")
    missing = client.delete(f"/profiles/{profile_id}/foods/{logged['entry_id']}")
    day_deleted = client.delete(
        f"/profiles/{profile_id}/days/{logged['daily_log_id']}"
    )
    day_missing = client.delete(
        f"/profiles/{profile_id}/days/{logged['daily_log_id']}"
    )

    assert deleted.status_code == 204
    assert missing.status_code == 404
    assert day_deleted.status_code == 204
    assert day_missing.status_code == 404
    assert client.get(f"/profiles/{profile_id}/days").json() == {"days": []}


def test_deficiencies_ranked_for_default_demographic(container) -> None:
    client = TestClient(create_app(container))
    profile_id = uuid4()
    for day in range(1, 6):
        client.post(
            f"/profiles/{profile_id}/foods",
            json=orange(logged_at=f"2024-03-0{day}T08:00:00Z"),
        )

    response = client.get(f"/profiles/{profile_id}/deficiencies")

    assert response.status_code == 200
    data = response.json()
    assert data["demographic"] == "adultFemale"
    assert data["fast_track"] is False
    severities = [warning["severity"] for warning in data["warnings"]]
    assert severities[0] == "highRisk"
    water = next(w for w in data["warnings"] if w["nutrient"] == "water")
    assert water["consecutive_days_low"] == 5
    assert water["deficiency_profile"]["risk_model"] == {
        "kind": "dailyEssential",
        "onset_hours": 72,
    }
    assert "vitaminC" not in {warning["nutrient"] for warning in data["warnings"]}


def test_deficiencies_with_fast_track_and_demographic(container) -> None:
    client = TestClient(create_app(container))
    profile_id = uuid4()
    for day in range(1, 9):
        client.post(
            f"/profiles/{profile_id}/foods",
            json=orange(logged_at=f"2024-03-0{day}T08:00:00Z"),
        )

    response = client.get(
        f"/profiles/{profile_id}/deficiencies",
        params={"demographic": "adultMale", "fast_track": "true"},
    )

    data = response.json()
    assert data["demographic"] == "adultMale"
    assert data["fast_track"] is True
    iron = next(w for w in data["warnings"] if w["nutrient"] == "iron")
    assert iron["severity"] == "monitoring"
    assert "Fast-track" in iron["message"]


def test_deficiencies_reject_unknown_demographic(container) -> None:
    client = TestClient(create_app(container))

    response = client.get(
        f"/profiles/{uuid4()}/deficiencies", params={"demographic": "toddler"}
    )

    assert response.status_code == 422


def test_store_outage_maps_to_service_unavailable(container) -> None:
    broken = replace(
        container,
        intake_log_service=IntakeLogService(
            repository=UnavailableIntakeLogRepository(),
            analyzer=container.analyzer,
        ),
    )
    client = TestClient(create_app(broken))

    analysis = client.get(f"/profiles/{uuid4()}/deficiencies")
    logging_food = client.post(f"/profiles/{uuid4()}/foods", json=orange())

    assert analysis.status_code == 503
    assert logging_food.status_code == 503
    assert analysis.json() == {"detail": "store down"}


def test_nutrient_detail(container) -> None:
    client = TestClient(create_app(container))

    vitamin_c = client.get("/nutrients/vitaminC")
    fiber = client.get("/nutrients/fiber")
    unknown = client.get("/nutrients/unobtainium")

    assert vitamin_c.status_code == 200
    data = vitamin_c.json()
    assert data["name"] == "Vitamin C"
    assert data["category"] == "vitamin"
    assert data["solubility"] == "waterSoluble"
    assert data["allowances"]["adultFemale"] == {"value": 75.0, "unit": "mg"}
    assert data["deficiency_profile"]["common_name"] == "Scurvy"
    assert data["deficiency_profile"]["risk_model"] == {
        "kind": "dailyTurnover",
        "onset_weeks": 4,
    }
    assert fiber.json()["deficiency_profile"] is None
    assert unknown.status_code == 422
