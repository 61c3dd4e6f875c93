"""
Complaint Model
"""

from extensions import db
from datetime import datetime
from enum import Enum


class ComplaintStatus(str, Enum):
    """Complaint status enum

    A flat set of values; which status may follow which is not enforced here.
    """
    PENDING = 'pending'
    IN_PROGRESS = 'in-progress'
    COMPLETED = 'completed'
    REJECTED = 'rejected'

    @classmethod
    def values(cls):
        return [status.value for status in cls]


class Complaint(db.Model):
    """Complaint (pengaduan) submitted by a citizen"""

    __tablename__ = 'complaints'

    id = db.Column(db.Integer, primary_key=True)
    citizen_id = db.Column(db.Integer, db.ForeignKey('citizens.id'), nullable=False, index=True)

    description = db.Column(db.Text, nullable=False)
    location = db.Column(db.String(255), nullable=False)

    status = db.Column(
        db.Enum(
            ComplaintStatus,
            name='complaint_status',
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        default=ComplaintStatus.PENDING,
        nullable=False,
    )
    response = db.Column(db.Text, nullable=True)  # set by administrators only

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, nullable=True)

    citizen = db.relationship('Citizen', back_populates='complaints')
    photos = db.relationship('Photo', back_populates='complaint', order_by='Photo.id')
    validations = db.relationship('Validation', back_populates='complaint', lazy='dynamic')

    def __init__(self, **kwargs):
        """Initialize complaint"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def to_dict(self, include_citizen=False, include_photos=False):
        """Convert complaint to dictionary"""
        data = {
            'id': self.id,
            'citizen_id': self.citizen_id,
            'description': self.description,
            'location': self.location,
            'status': self.status.value if self.status else None,
            'response': self.response,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

        if include_citizen:
            data['citizen'] = self.citizen.to_dict() if self.citizen else None

        if include_photos:
            data['photos'] = [photo.to_dict() for photo in self.photos or []]

        return data

    def __repr__(self):
        return f'<Complaint {self.id} - {self.status}>'
