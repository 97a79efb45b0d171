"""Cluster operation responses."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    ok: bool
    resource_error: str | None = None


class SnapshotResponse(BaseModel):
    success: bool


class CompactDiskResponse(BaseModel):
    success: bool


class StatsResponse(BaseModel):
    """API latency and throughput statistics.

    Per-endpoint figures are keyed by ``"<METHOD> <path>"``.
    """

    delete_latency_ms: float = 0.0
    delete_requests_per_second: float = 0.0
    import_latency_ms: float = 0.0
    import_requests_per_second: float = 0.0
    latency_ms: dict[str, float] = {}
    overloaded_requests_per_second: float = 0.0
    pending_write_batches: float = 0.0
    requests_per_second: dict[str, float] = {}
    search_latency_ms: float = 0.0
    search_requests_per_second: float = 0.0
    total_requests_per_second: float = 0.0
    write_latency_ms: float = 0.0
    write_requests_per_second: float = 0.0


class MetricsResponse(BaseModel):
    """System and memory metrics.

    The service reports every figure as a string and adds per-CPU keys
    depending on the host, so unknown keys are kept as extra fields.
    """

    system_cpu_active_percentage: str | None = None
    system_disk_total_bytes: str | None = None
    system_disk_used_bytes: str | None = None
    system_memory_total_bytes: str | None = None
    system_memory_used_bytes: str | None = None
    system_network_received_bytes: str | None = None
    system_network_sent_bytes: str | None = None
    typesense_memory_active_bytes: str | None = None
    typesense_memory_allocated_bytes: str | None = None
    typesense_memory_fragmentation_ratio: str | None = None
    typesense_memory_mapped_bytes: str | None = None
    typesense_memory_metadata_bytes: str | None = None
    typesense_memory_resident_bytes: str | None = None
    typesense_memory_retained_bytes: str | None = None

    model_config = {"extra": "allow"}
