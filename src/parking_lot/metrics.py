"""Prometheus metrics for the parking facility."""

from pathlib import Path

from prometheus_client import Counter, Gauge, Histogram, CollectorRegistry, generate_latest

# Create a custom registry to avoid conflicts with default metrics
REGISTRY = CollectorRegistry()

# Current occupancy gauges
VEHICLES_PARKED = Gauge(
    "parking_vehicles_parked",
    "Number of vehicles currently parked",
    registry=REGISTRY,
)

CAPACITY = Gauge(
    "parking_capacity",
    "Total number of parking slots",
    registry=REGISTRY,
)

# Admission and release counters per vehicle category
ADMISSIONS = Counter(
    "parking_admissions_total",
    "Total number of vehicles admitted",
    ["category"],
    registry=REGISTRY,
)

REJECTIONS = Counter(
    "parking_rejections_total",
    "Total number of vehicles turned away because the lot was full",
    ["category"],
    registry=REGISTRY,
)

RELEASES = Counter(
    "parking_releases_total",
    "Total number of vehicles released",
    ["category"],
    registry=REGISTRY,
)

# Revenue collected during this run
REVENUE = Counter(
    "parking_revenue_total",
    "Revenue collected from released vehicles",
    registry=REGISTRY,
)

FEE_AMOUNT = Histogram(
    "parking_fee_amount",
    "Fee charged per released vehicle",
    buckets=(10.0, 20.0, 50.0, 100.0, 200.0, 500.0, 1000.0),
    registry=REGISTRY,
)


def record_admission(category: str) -> None:
    """Record a successful admission."""
    ADMISSIONS.labels(category=category).inc()


def record_rejection(category: str) -> None:
    """Record an admission refused for lack of space."""
    REJECTIONS.labels(category=category).inc()


def record_release(category: str, fee: float) -> None:
    """Record a release and the fee it produced."""
    RELEASES.labels(category=category).inc()
    REVENUE.inc(fee)
    FEE_AMOUNT.observe(fee)


def update_occupancy(parked: int, capacity: int) -> None:
    """Update occupancy gauges."""
    VEHICLES_PARKED.set(parked)
    CAPACITY.set(capacity)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest(REGISTRY)


def write_metrics(path: str | Path) -> Path:
    """Write the current metrics in text exposition format to ``path``."""
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(get_metrics())
    return output
