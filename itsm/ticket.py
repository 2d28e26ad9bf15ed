"""
Access-request ticket draft inferred from a single user message.

This is intentionally simple and does not attempt real extraction: plain
substring checks on the lower-cased message, and constant placeholders for
the fields a human still has to fill in.
"""
import json
import uuid
from dataclasses import dataclass, asdict
from datetime import datetime, timezone

TICKET_DRAFT_ATTRIBUTE = "itsm.ticket_draft_json"


@dataclass
class AccessRequest:
    """Minimal ticket object for an ITSM access request."""
    id: str
    type: str
    requested_for: str
    resource: str
    access_level: str
    duration: str
    business_justification: str
    approvals_required: str
    risk_level: str
    status: str
    created_at: str
    recommended_actions: str

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)


def infer_access_request_draft(message: str) -> AccessRequest:
    lower = message.lower()

    # later matches win
    resource = "unknown"
    if "snowflake" in lower:
        resource = "snowflake"
    if "datadog" in lower:
        resource = "datadog"
    if "github" in lower:
        resource = "github"
    if "prod" in lower or "production" in lower:
        resource += "_prod"

    if "admin" in lower:
        access_level = "admin"
    elif "read" in lower:
        access_level = "read"
    elif "write" in lower:
        access_level = "write"
    else:
        access_level = "unknown"

    # "7" and "day" are independent substrings, not the phrase "7 days"
    if "24" in lower and "hour" in lower:
        duration = "24h"
    elif "7" in lower and "day" in lower:
        duration = "7d"
    else:
        duration = "unknown"

    risk = "high" if ("prod" in lower or "admin" in lower) else "medium"

    return AccessRequest(
        id="AR-" + str(uuid.uuid4())[:8].upper(),
        type="access_request",
        requested_for="self",
        resource=resource,
        access_level=access_level,
        duration=duration,
        business_justification="provided_in_chat",
        approvals_required="manager + system_owner",
        risk_level=risk,
        status="draft",
        created_at=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        recommended_actions="collect justification; confirm duration; route for approval; provision access; log audit",
    )


def ticket_draft_attributes(message: str) -> dict[str, str]:
    """Span attributes for the draft inferred from ``message``."""
    return {TICKET_DRAFT_ATTRIBUTE: infer_access_request_draft(message).to_json()}
