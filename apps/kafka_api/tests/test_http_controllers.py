"""HTTP Controller 단위 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from apps._shared.messaging import BrokerUnavailableError
from apps.kafka_api.application.commands import SendMessageCommand
from apps.kafka_api.main import app
from apps.kafka_api.presentation.http.schemas import ErrorResponse
from apps.kafka_api.setup.dependencies import get_send_message_command


@pytest.fixture
def client(mock_publisher: AsyncMock):
    """발행자를 mock으로 대체한 TestClient."""
    app.dependency_overrides[get_send_message_command] = lambda: SendMessageCommand(
        mock_publisher
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthController:
    """HealthController 테스트."""

    def test_health_check(self, client: TestClient) -> None:
        """헬스체크 엔드포인트."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["timestamp"]

    def test_ping(self, client: TestClient) -> None:
        """Ping 엔드포인트."""
        response = client.get("/ping")

        assert response.status_code == 200
        assert response.json() == "pong"


class TestMessageController:
    """MessageController 테스트."""

    def test_send_message_success(
        self,
        client: TestClient,
        mock_publisher: AsyncMock,
    ) -> None:
        """발행 성공 시 200과 MessageId 반환."""
        response = client.post("/api/message", json={"id": "order-42"})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "messageId": "messages-0-42",
            "sentId": "order-42",
        }
        envelope = mock_publisher.publish.call_args[0][0]
        assert envelope.id == "order-42"

    @pytest.mark.parametrize("body", [{"id": ""}, {"id": "   "}, {}, {"id": None}])
    def test_blank_id_returns_400_without_publish(
        self,
        client: TestClient,
        mock_publisher: AsyncMock,
        body: dict,
    ) -> None:
        """공백 ID는 400, 발행하지 않음."""
        response = client.post("/api/message", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "ID is required"}
        mock_publisher.publish.assert_not_called()

    def test_invalid_body_returns_400(
        self,
        client: TestClient,
        mock_publisher: AsyncMock,
    ) -> None:
        """JSON 객체가 아닌 본문은 400."""
        response = client.post(
            "/api/message",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"
        mock_publisher.publish.assert_not_called()

    def test_invalid_body_details_match_error_schema(self, client: TestClient) -> None:
        """400 본문의 details는 검증 오류 목록이며 ErrorResponse로 표현 가능."""
        response = client.post("/api/message", json=["order-42"])

        body = response.json()
        assert response.status_code == 400
        assert isinstance(body["details"], list)
        assert ErrorResponse.model_validate(body).details == body["details"]

    def test_broker_failure_returns_500(
        self,
        client: TestClient,
        mock_publisher: AsyncMock,
    ) -> None:
        """발행 실패 시 500, sentId 없이 error/details만 반환."""
        mock_publisher.publish.side_effect = BrokerUnavailableError("Could not connect")

        response = client.post("/api/message", json={"id": "order-42"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to send message to Kafka",
            "details": "Could not connect",
        }

    def test_unexpected_failure_returns_500(
        self,
        client: TestClient,
        mock_publisher: AsyncMock,
    ) -> None:
        """예상치 못한 오류도 500으로 변환."""
        mock_publisher.publish.side_effect = RuntimeError("boom")

        response = client.post("/api/message", json={"id": "order-42"})

        assert response.status_code == 500
        assert response.json()["details"] == "boom"


class TestMetricsEndpoint:
    """/metrics 테스트."""

    def test_metrics_exposes_publish_counter(self, client: TestClient) -> None:
        """발행 카운터 노출."""
        client.post("/api/message", json={"id": "order-42"})

        response = client.get("/metrics")

        assert response.status_code == 200
        assert 'messages_published_total{broker="kafka",status="success"}' in response.text
