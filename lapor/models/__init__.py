"""
Models package initialization
Import all models here for easy access
"""

from lapor.models.citizen import Citizen
from lapor.models.complaint import Complaint, ComplaintStatus
from lapor.models.photo import Photo
from lapor.models.admin import Admin
from lapor.models.validation import Validation

__all__ = [
    'Citizen',
    'Complaint',
    'ComplaintStatus',
    'Photo',
    'Admin',
    'Validation',
]
