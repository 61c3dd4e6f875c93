"""
Citizen Model
"""

from extensions import db
from datetime import datetime


class Citizen(db.Model):
    """A registered complainant (masyarakat)"""

    __tablename__ = 'citizens'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    # 16-digit national ID kept as a string; duplicates are not rejected here
    id_number = db.Column(db.String(16), nullable=True, index=True)
    phone = db.Column(db.String(20), nullable=True)
    address = db.Column(db.Text, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    complaints = db.relationship('Complaint', back_populates='citizen', lazy='dynamic')

    def __init__(self, **kwargs):
        """Initialize citizen"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def to_dict(self):
        """Convert citizen to dictionary"""
        return {
            'id': self.id,
            'name': self.name,
            'id_number': str(self.id_number) if self.id_number is not None else None,
            'phone': self.phone,
            'address': self.address,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Citizen {self.id} - {self.name}>'
