"""Tests for API endpoints."""

from __future__ import annotations

import math

import pytest
from fastapi.testclient import TestClient

from shapesight.main import app
from tests.conftest import RECT_2X3_JSON, RIGHT_TRIANGLE_JSON, UNIT_CIRCLE_JSON, UNIT_SQUARE_JSON


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "FindLargestShape" in data["operations"]
    assert len(data["operations"]) == 7


def test_metrics_default_unit():
    response = client.post("/api/geometry/metrics", json={"shape": RECT_2X3_JSON})
    assert response.status_code == 200
    data = response.json()
    assert data["metrics"]["area"] == pytest.approx(6.0)
    assert data["metrics"]["perimeter"] == pytest.approx(10.0)
    assert data["metrics"]["bounding_box"] == {"min_x": 1.0, "min_y": 2.0, "max_x": 3.0, "max_y": 5.0}
    assert "timestamp" in data


def test_metrics_feet():
    response = client.post(
        "/api/geometry/metrics",
        json={"shape": UNIT_SQUARE_JSON, "unit": {"kind": "feet"}},
    )
    assert response.status_code == 200
    assert response.json()["metrics"]["area"] == pytest.approx(10.7639)


def test_metrics_custom_unit():
    response = client.post(
        "/api/geometry/metrics",
        json={"shape": UNIT_CIRCLE_JSON, "unit": {"kind": "custom", "factor": 2}},
    )
    assert response.status_code == 200
    assert response.json()["metrics"]["perimeter"] == pytest.approx(4 * math.pi)


def test_metrics_malformed_triangle_is_client_error():
    shape = {"kind": "triangle", "vertices": [{"x": 0, "y": 0}, {"x": 1, "y": 0}]}
    response = client.post("/api/geometry/metrics", json={"shape": shape})
    assert response.status_code == 400
    assert response.json()["error"] == "ShapeValidationError"


def test_metrics_unknown_kind_rejected():
    response = client.post("/api/geometry/metrics", json={"shape": {"kind": "hexagon"}})
    assert response.status_code == 422


def test_analyze_triangle():
    response = client.post("/api/geometry/triangle", json={"vertices": RIGHT_TRIANGLE_JSON["vertices"]})
    assert response.status_code == 200
    data = response.json()
    assert data["info"]["is_right_triangle"] is True
    assert data["info"]["is_scalene"] is True
    assert data["metrics"]["area"] == pytest.approx(6.0)


def test_analyze_degenerate_triangle():
    vertices = [{"x": 0, "y": 0}, {"x": 1, "y": 1}, {"x": 2, "y": 2}]
    response = client.post("/api/geometry/triangle", json={"vertices": vertices})
    assert response.status_code == 400
    assert response.json()["error"] == "DegenerateTriangleError"


def test_batch_partial_failure():
    shapes = [
        {"id": "tri", "geometry": RIGHT_TRIANGLE_JSON},
        {"id": "circle", "geometry": UNIT_CIRCLE_JSON},
        {"id": "bad", "geometry": {"kind": "triangle", "vertices": [{"x": 0, "y": 0}]}},
        {"id": "square", "geometry": UNIT_SQUARE_JSON},
    ]
    response = client.post("/api/geometry/batch", json={"shapes": shapes})
    assert response.status_code == 200
    data = response.json()
    assert data["shape_count"] == 4
    assert [r["shape_id"] for r in data["results"]] == ["tri", "circle", "bad", "square"]
    bad = data["results"][2]
    assert bad["metrics"] is None
    assert bad["error"]
    assert all(r["error"] is None for i, r in enumerate(data["results"]) if i != 2)
    assert data["total_area"] == pytest.approx(6.0 + math.pi + 1.0)


def test_transform_rectangle():
    response = client.post(
        "/api/geometry/transform",
        json={"shape": RECT_2X3_JSON, "translate": {"x": 1, "y": 1}, "scale": 2, "rotate_radians": 0},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["transformed"]["kind"] == "rectangle"
    assert data["transformed"]["top_left"] == {"x": 3.0, "y": 5.0}
    assert data["transformed"]["width"] == 4.0
    assert data["original_metrics"]["area"] == pytest.approx(6.0)
    assert data["transformed_metrics"]["area"] == pytest.approx(24.0)


def test_transform_defaults_are_identity():
    response = client.post("/api/geometry/transform", json={"shape": UNIT_SQUARE_JSON})
    assert response.status_code == 200
    data = response.json()
    assert data["transformed"] == UNIT_SQUARE_JSON
    assert data["original_metrics"] == data["transformed_metrics"]


def test_largest_by_perimeter():
    shapes = [
        {"id": "square", "geometry": UNIT_SQUARE_JSON},
        {"id": "rect", "geometry": RECT_2X3_JSON},
        {"id": "circle", "geometry": UNIT_CIRCLE_JSON},
    ]
    response = client.post("/api/geometry/largest", json={"shapes": shapes, "criterion": "perimeter"})
    assert response.status_code == 200
    data = response.json()
    assert data["largest"]["id"] == "rect"
    assert data["largest"]["geometry"]["kind"] == "rectangle"
    assert data["metrics"]["perimeter"] == pytest.approx(10.0)
    assert [e["shape_id"] for e in data["ranked_shapes"]] == ["rect", "circle", "square"]


def test_largest_empty():
    response = client.post("/api/geometry/largest", json={"shapes": []})
    assert response.status_code == 400
    assert response.json()["error"] == "EmptyCollectionError"


def test_legacy_triangle():
    response = client.post(
        "/api/legacy/triangle",
        json={"point_a": {"x": 0, "y": 0}, "point_b": {"x": 2, "y": 0}, "point_c": {"x": 1, "y": math.sqrt(3)}},
    )
    assert response.status_code == 200
    props = response.json()["properties"]
    assert props["is_equilateral"] is True
    assert props["area"] == pytest.approx(1.732, abs=0.001)
    assert "timestamp" not in response.json()


def test_legacy_polygon_concave():
    points = [{"x": 0, "y": 0}, {"x": 2, "y": 1}, {"x": 4, "y": 0}, {"x": 2, "y": 3}]
    response = client.post("/api/legacy/polygon", json={"points": points})
    assert response.status_code == 200
    assert response.json()["properties"] == {"is_convex": False, "area": 0.0, "vertex_count": 4}


def test_legacy_polygon_too_few():
    response = client.post("/api/legacy/polygon", json={"points": [{"x": 0, "y": 0}]})
    assert response.status_code == 400
    assert response.json()["error"] == "TooFewVerticesError"
