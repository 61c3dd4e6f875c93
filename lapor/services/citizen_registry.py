"""
Citizen Registry
Lookup and creation of citizen records
"""

from extensions import db
from lapor.models.citizen import Citizen
from lapor.errors import NotFoundError


class CitizenRegistry:
    """Find-or-create support for citizens; callers decide when to create"""

    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def find_by_id_number(self, id_number):
        """Exact lookup by national ID number; the oldest record wins on duplicates"""
        return (
            self.session.query(Citizen)
            .filter(Citizen.id_number == id_number)
            .order_by(Citizen.id.asc())
            .first()
        )

    def find_by_name_and_phone(self, name, phone):
        """Fallback lookup used when no ID number was submitted"""
        return (
            self.session.query(Citizen)
            .filter(Citizen.name == name, Citizen.phone == phone)
            .order_by(Citizen.id.asc())
            .first()
        )

    def create(self, name, address, id_number=None, phone=None):
        """Insert a citizen; does not check for an existing record"""
        citizen = Citizen(
            name=name,
            id_number=id_number,
            phone=phone,
            address=address,
        )
        self.session.add(citizen)
        self.session.commit()
        return citizen

    def get(self, citizen_id):
        citizen = self.session.get(Citizen, citizen_id)
        if citizen is None:
            raise NotFoundError('Citizen not found')
        return citizen

    def list_all(self):
        return self.session.query(Citizen).order_by(Citizen.id.asc()).all()
