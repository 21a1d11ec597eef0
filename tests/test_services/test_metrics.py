"""
Tests for the metrics collector.
"""

import pytest

from oerschema.services.metrics import MetricsCollector, normalize_path


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/api/v1/schema/class/Course", "/api/v1/schema/class/{class}"),
        ("/api/v1/schema/property/courseIdentifier", "/api/v1/schema/property/{property}"),
        ("/api/v1/schema/class", "/api/v1/schema/class"),
        ("/api/v1/schema", "/api/v1/schema"),
        ("/api/v1/health", "/api/v1/health"),
    ],
)
def test_normalize_path(path: str, expected: str):
    assert normalize_path(path) == expected


def test_record_request_and_errors():
    collector = MetricsCollector()

    collector.record_request("GET", "/api/v1/schema", 200, 0.01)
    collector.record_request("GET", "/api/v1/schema/class/{class}", 404, 0.02)

    metrics = collector.get_metrics()
    assert metrics["total_requests"] == 2
    assert metrics["total_errors"] == 1
    assert metrics["error_rate"] == 0.5
    assert metrics["status_code_counts"] == {"200": 1, "404": 1}


def test_record_conversion():
    collector = MetricsCollector()

    collector.record_conversion("class", "turtle")
    collector.record_conversion("class", "turtle")
    collector.record_conversion("vocabulary", "json")

    assert collector.get_metrics()["conversions"] == {"class/turtle": 2, "vocabulary/json": 1}


def test_prometheus_output():
    collector = MetricsCollector()
    collector.record_request("GET", "/api/v1/schema", 200, 0.5)
    collector.record_conversion("vocabulary", "jsonld")

    text = collector.to_prometheus()

    assert "# TYPE oerschema_http_requests_total counter" in text
    assert 'oerschema_http_requests_total{method="GET",path="/api/v1/schema"} 1' in text
    assert 'oerschema_conversions_total{scope="vocabulary",format="jsonld"} 1' in text
    assert 'oerschema_http_response_time_seconds{method="GET",path="/api/v1/schema"} 0.500000' in text
    assert text.endswith("\n")
