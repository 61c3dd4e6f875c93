"""
Photo Model
"""

from flask import current_app
from extensions import db
from datetime import datetime

INLINE_PREFIX = 'data:'
UPLOAD_ROUTE = '/uploads/pengaduan'


class Photo(db.Model):
    """Photo attached to a complaint (foto)"""

    __tablename__ = 'photos'

    id = db.Column(db.Integer, primary_key=True)
    complaint_id = db.Column(db.Integer, db.ForeignKey('complaints.id'), nullable=False, index=True)
    citizen_id = db.Column(db.Integer, db.ForeignKey('citizens.id'), nullable=False)

    # Stored file name under the uploads folder, or an inline data: URI
    file = db.Column(db.Text, nullable=False)
    captured_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    complaint = db.relationship('Complaint', back_populates='photos')
    citizen = db.relationship('Citizen')

    def __init__(self, **kwargs):
        """Initialize photo"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    @property
    def is_inline(self):
        return self.file.startswith(INLINE_PREFIX)

    @property
    def url(self):
        """Publicly fetchable URL of the photo"""
        if self.is_inline:
            return self.file
        base_url = current_app.config.get('PUBLIC_BASE_URL', '').rstrip('/')
        return f'{base_url}{UPLOAD_ROUTE}/{self.file}'

    def to_dict(self):
        """Convert photo to dictionary"""
        return {
            'id': self.id,
            'complaint_id': self.complaint_id,
            'citizen_id': self.citizen_id,
            'file': None if self.is_inline else self.file,
            'url': self.url,
            'captured_at': self.captured_at.isoformat() if self.captured_at else None,
        }

    def __repr__(self):
        return f'<Photo {self.id} - Complaint {self.complaint_id}>'
