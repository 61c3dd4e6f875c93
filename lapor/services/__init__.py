"""
Services Package
Stores and workflows behind the API routes
"""

from lapor.services.citizen_registry import CitizenRegistry
from lapor.services.complaint_store import ComplaintStore
from lapor.services.attachment_store import AttachmentStore
from lapor.services.submission_workflow import SubmissionWorkflow, SubmissionResult
from lapor.services.status_policy import StatusTransitionPolicy

__all__ = [
    'CitizenRegistry',
    'ComplaintStore',
    'AttachmentStore',
    'SubmissionWorkflow',
    'SubmissionResult',
    'StatusTransitionPolicy',
]
