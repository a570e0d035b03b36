import logging
import uuid

import pytest

pytestmark = pytest.mark.integration


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/health")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_malformed_request_id_is_replaced(self, client):
        supplied = "bad id; DROP"
        response = client.get("/health", HTTP_X_REQUEST_ID=supplied)
        request_id = response["X-Request-ID"]
        assert request_id != supplied
        assert str(uuid.UUID(request_id, version=4)) == request_id

    def test_correlation_id_in_logs(self, client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"correlation_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )

    def test_service_logs_carry_correlation_id(self, api_client_with_correlation, caplog):
        api_client, cid = api_client_with_correlation
        with caplog.at_level(logging.INFO):
            response = api_client.post(
                "/api/v1/categories/", {"name": "Books"}, format="json"
            )
        assert response["X-Request-ID"] == cid
        messages = [record.getMessage() for record in caplog.records]
        assert any("category.created" in m and cid in m for m in messages), messages

    def test_user_email_is_masked_in_logs(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            api_client.post(
                "/api/v1/users/",
                {"email": "hidden.person@example.com", "first_name": "A", "last_name": "B"},
                format="json",
            )
        output = "\n".join(record.getMessage() for record in caplog.records)
        assert "user.created" in output
        assert "hidden.person" not in output
        assert "***@example.com" in output
