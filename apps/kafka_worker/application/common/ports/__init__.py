"""Application Ports."""

from apps.kafka_worker.application.common.ports.record_stream import RecordStream

__all__ = ["RecordStream"]
