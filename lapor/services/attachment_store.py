"""
Attachment Store
Persists complaint photos and their metadata rows
"""

from extensions import db
from lapor.models.photo import Photo
from lapor.services.storage_service import get_storage_service


class AttachmentStore:

    def __init__(self, session=None, storage=None):
        self.session = session if session is not None else db.session
        self._storage = storage

    @property
    def storage(self):
        # Resolved lazily so ATTACHMENT_STORAGE is read inside the app context
        if self._storage is None:
            self._storage = get_storage_service()
        return self._storage

    def create(self, complaint_id, citizen_id, file):
        """Store the file content, then insert the photo row"""
        stored = self.storage.save(file)
        photo = Photo(
            complaint_id=complaint_id,
            citizen_id=citizen_id,
            file=stored,
        )
        self.session.add(photo)
        self.session.commit()
        return photo

    def list_for_complaint(self, complaint_id):
        return (
            self.session.query(Photo)
            .filter(Photo.complaint_id == complaint_id)
            .order_by(Photo.id.asc())
            .all()
        )
