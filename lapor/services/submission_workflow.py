"""
Submission Workflow
Turns a raw complaint form into citizen, complaint and photo records
"""

from flask import current_app

from lapor.services.citizen_registry import CitizenRegistry
from lapor.services.complaint_store import ComplaintStore
from lapor.services.attachment_store import AttachmentStore
from lapor.utils.request_data import as_text
from lapor.utils.validators import (
    DEFAULT_MAX_ATTACHMENT_BYTES,
    REQUIRED_SUBMISSION_FIELDS,
    validate_id_number,
    validate_image,
    validate_phone,
    validate_required,
)


def has_upload(file):
    """True when the form carried a non-empty file field"""
    return file is not None and bool(file.filename)


class SubmissionResult:
    """What a successful submission produced"""

    def __init__(self, complaint, citizen, photo=None):
        self.complaint = complaint
        self.citizen = citizen
        self.photo = photo

    @property
    def attachment_url(self):
        return self.photo.url if self.photo else None

    def to_dict(self):
        return {
            'complaint': self.complaint.to_dict(),
            'citizen': self.citizen.to_dict(),
            'attachment_url': self.attachment_url,
        }


class SubmissionWorkflow:
    """
    Orchestrates a complaint submission.

    Each step is its own committed store call. Nothing wraps them in a
    transaction: a failure after the citizen is created leaves that citizen
    in place, and a failure while storing the photo leaves the complaint
    without it.
    """

    def __init__(self, registry=None, complaints=None, attachments=None):
        self.registry = registry or CitizenRegistry()
        self.complaints = complaints or ComplaintStore()
        self.attachments = attachments or AttachmentStore()

    def validate(self, name, id_number, phone, location, description, image):
        config = current_app.config
        required = REQUIRED_SUBMISSION_FIELDS
        if not config.get('REQUIRE_ID_NUMBER', True):
            required = tuple(field for field in required if field != 'id_number')

        validate_required({
            'name': name,
            'description': description,
            'id_number': id_number,
            'location': location,
        }, required)
        if id_number:
            validate_id_number(id_number)
        phone = validate_phone(
            phone,
            allow_separators=config.get('PHONE_ALLOW_SEPARATORS', False),
        )
        if has_upload(image):
            validate_image(
                image,
                config.get('MAX_ATTACHMENT_BYTES', DEFAULT_MAX_ATTACHMENT_BYTES),
            )
        return phone

    def resolve_citizen(self, name, id_number, phone, address):
        if id_number:
            citizen = self.registry.find_by_id_number(id_number)
        else:
            citizen = self.registry.find_by_name_and_phone(name, phone)

        if citizen is not None:
            return citizen

        current_app.logger.info('Registering new citizen for complaint submission')
        return self.registry.create(
            name=name,
            id_number=id_number,
            phone=phone,
            address=address,
        )

    def submit(self, name, id_number, location, description, phone=None, image=None):
        name = (as_text(name) or '').strip()
        location = (as_text(location) or '').strip()
        description = (as_text(description) or '').strip()
        # Checked as sent; padding makes it invalid rather than trimmed
        id_number = as_text(id_number) or None

        phone = self.validate(name, id_number, phone, location, description, image)

        # The submitted location doubles as the citizen's address
        citizen = self.resolve_citizen(name, id_number, phone, address=location)

        complaint = self.complaints.create(
            citizen_id=citizen.id,
            description=description,
            location=location,
        )
        current_app.logger.info(f'Complaint {complaint.id} submitted by citizen {citizen.id}')

        photo = None
        if has_upload(image):
            photo = self.attachments.create(
                complaint_id=complaint.id,
                citizen_id=citizen.id,
                file=image,
            )
            current_app.logger.info(f'Photo {photo.id} stored for complaint {complaint.id}')

        return SubmissionResult(complaint, citizen, photo)
