from fastapi.testclient import TestClient

from unitshift.server.main import app

client = TestClient(app)


def test_health_endpoint() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_options_endpoint_lists_form_choices() -> None:
    response = client.get("/api/v1/units/options")

    assert response.status_code == 200
    payload = response.json()
    assert len(payload) == 9
    assert payload[0] == {"label": "Weight (g)", "value": "weight_1"}
    assert payload[3] == {"label": "Weight (oz)", "value": "weight_28.34952"}
    assert payload[-1] == {"label": "Items", "value": "items"}


def test_scales_endpoint_lists_family_table() -> None:
    response = client.get("/api/v1/units/volume/scales")

    assert response.status_code == 200
    assert response.json() == {
        "family": "volume",
        "scales": [0.001, 1.0, 1000.0],
        "units": ["mL", "L", "kL"],
    }


def test_scale_endpoint_resolves_display_unit() -> None:
    response = client.get("/api/v1/units/weight/scale", params={"value": 1200})

    assert response.status_code == 200
    payload = response.json()
    assert payload["scale"] == 1000.0
    assert payload["unit"] == "kg"
    assert payload["display"] == "1.2kg"


def test_scale_endpoint_rejects_unknown_family() -> None:
    response = client.get("/api/v1/units/length/scale", params={"value": 3})

    assert response.status_code == 422
    assert "weight, volume" in response.json()["detail"]


def test_scale_endpoint_rejects_negative_value() -> None:
    response = client.get("/api/v1/units/weight/scale", params={"value": -1})

    assert response.status_code == 422


def test_name_endpoint_returns_unit_and_system() -> None:
    response = client.get("/api/v1/units/weight/name", params={"scale": 453.6})

    assert response.status_code == 200
    assert response.json() == {"family": "weight", "scale": 453.6, "unit": "lb", "system": "imperial"}


def test_name_endpoint_rejects_inexact_scale() -> None:
    response = client.get("/api/v1/units/weight/name", params={"scale": 453.61})

    assert response.status_code == 422


def test_option_key_endpoint_decodes_submitted_key() -> None:
    response = client.get("/api/v1/units/option-key", params={"key": "volume_0.001"})

    assert response.status_code == 200
    assert response.json() == {"variant_unit": "volume", "variant_unit_scale": 0.001, "unit": "mL"}


def test_option_key_endpoint_decodes_items() -> None:
    response = client.get("/api/v1/units/option-key", params={"key": "items"})

    assert response.status_code == 200
    assert response.json() == {"variant_unit": "items", "variant_unit_scale": None, "unit": None}


def test_option_key_endpoint_rejects_malformed_key() -> None:
    response = client.get("/api/v1/units/option-key", params={"key": "weight_kg"})

    assert response.status_code == 422


def test_unit_price_endpoint_prices_per_kilogram() -> None:
    response = client.post(
        "/api/v1/unit-prices",
        json={"price": "12.50", "unit_value": "500", "variant_unit": "weight", "variant_unit_scale": 1000},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["unit"] == "kg"
    assert payload["unit_price"] == "25.00"


def test_unit_price_endpoint_without_unit_value() -> None:
    response = client.post("/api/v1/unit-prices", json={"price": "3", "variant_unit": "items"})

    assert response.status_code == 200
    assert response.json() == {"unit": "item", "denominator": None, "unit_price": None}
