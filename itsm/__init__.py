"""ITSM access-request assistant."""

from itsm.ticket import AccessRequest, infer_access_request_draft, ticket_draft_attributes
from itsm.prompts import ITSM_SYSTEM_PROMPT

__all__ = [
    "AccessRequest",
    "infer_access_request_draft",
    "ticket_draft_attributes",
    "ITSM_SYSTEM_PROMPT",
]
