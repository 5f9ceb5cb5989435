# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""
from prometheus_client import Counter, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "registration_requests_total",
    "Total HTTP requests to the registration API",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "registration_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "registration_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
REGISTRATIONS_TOTAL = Counter(
    "registration_attendees_registered_total",
    "Attendee registration attempts by outcome",
    ["outcome"],
)
ATTENDANCE_CHANGES = Counter(
    "registration_attendance_changes_total",
    "Attendance marks and removals",
    ["action"],
)
EMAILS_SENT = Counter(
    "registration_emails_total",
    "Emails handed to the mail relay",
    ["kind", "status"],
)
BROADCAST_RECIPIENTS = Histogram(
    "registration_broadcast_recipients",
    "Number of recipients per broadcast",
    buckets=[1, 10, 50, 100, 250, 500, 1000, 5000],
)
CHECKOUT_SESSIONS = Counter(
    "registration_checkout_sessions_total",
    "Checkout sessions requested from the payment gateway",
    ["type", "status"],
)
