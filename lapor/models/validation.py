from extensions import db
from datetime import datetime


class Validation(db.Model):
    """An administrator's validation of a complaint (validasi)"""
    __tablename__ = 'validations'

    id = db.Column(db.Integer, primary_key=True)
    complaint_id = db.Column(db.Integer, db.ForeignKey('complaints.id'), nullable=False, index=True)
    admin_id = db.Column(db.Integer, db.ForeignKey('admins.id'), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    complaint = db.relationship('Complaint', back_populates='validations')
    admin = db.relationship('Admin', backref='validations')

    def to_dict(self):
        return {
            'id': self.id,
            'complaint_id': self.complaint_id,
            'admin_id': self.admin_id,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
