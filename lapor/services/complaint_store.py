"""
Complaint Store
Creation, listing and status updates of complaints
"""

from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import selectinload

from extensions import db
from lapor.models.complaint import Complaint, ComplaintStatus
from lapor.errors import InvalidStatus, NotFoundError


def parse_status(value):
    """Map a raw status string onto ComplaintStatus"""
    if isinstance(value, ComplaintStatus):
        return value
    try:
        return ComplaintStatus(str(value).strip().lower())
    except ValueError:
        raise InvalidStatus(
            f"Status must be one of: {', '.join(ComplaintStatus.values())}"
        )


class ComplaintStore:
    """
    Persistence for complaints.

    Status is a plain enumeration: update_status overwrites whatever value is
    current. Transition rules, when wanted, live in StatusTransitionPolicy.
    """

    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def create(self, citizen_id, description, location):
        complaint = Complaint(
            citizen_id=citizen_id,
            description=description,
            location=location,
            status=ComplaintStatus.PENDING,
            created_at=datetime.utcnow(),
        )
        self.session.add(complaint)
        self.session.commit()
        return complaint

    def get(self, complaint_id):
        complaint = self.session.get(Complaint, complaint_id)
        if complaint is None:
            raise NotFoundError('Complaint not found')
        return complaint

    def list_all(self, status=None):
        """All complaints, newest first, with citizen and photos loaded"""
        query = self.session.query(Complaint).options(
            selectinload(Complaint.citizen),
            selectinload(Complaint.photos),
        )
        if status is not None:
            query = query.filter(Complaint.status == parse_status(status))
        return query.order_by(Complaint.created_at.desc(), Complaint.id.desc()).all()

    def update_status(self, complaint_id, new_status, response=None):
        """Overwrite status (and response if given); always refreshes updated_at"""
        status = parse_status(new_status)
        complaint = self.get(complaint_id)

        complaint.status = status
        if response is not None:
            complaint.response = response
        complaint.updated_at = datetime.utcnow()

        self.session.commit()
        return complaint

    def status_counts(self):
        """Number of complaints per status, plus the total"""
        rows = (
            self.session.query(Complaint.status, func.count(Complaint.id))
            .group_by(Complaint.status)
            .all()
        )
        counts = {status.value: 0 for status in ComplaintStatus}
        for status, count in rows:
            counts[status.value] = count
        counts['total'] = sum(counts.values())
        return counts
