"""
Citizen Routes (masyarakat)
"""

from flask import Blueprint, current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from lapor.errors import LaporError
from lapor.services.citizen_registry import CitizenRegistry
from lapor.utils.request_data import as_text, get_field, request_data
from lapor.utils.validators import validate_id_number, validate_phone, validate_required

citizens_bp = Blueprint('citizens', __name__)


@citizens_bp.route('', methods=['POST'])
def create_citizen():
    """Register a citizen directly"""
    try:
        data = request_data()
        fields = {
            'name': as_text(get_field(data, 'name', 'nama')),
            'id_number': as_text(get_field(data, 'idNumber', 'id_number', 'nik', strip=False)),
            'address': as_text(get_field(data, 'address', 'alamat')),
        }
        validate_required(fields, ('name', 'id_number', 'address'))
        validate_id_number(fields['id_number'])
        phone = validate_phone(
            get_field(data, 'phone', 'no_hp'),
            allow_separators=current_app.config.get('PHONE_ALLOW_SEPARATORS', False),
        )

        citizen = CitizenRegistry().create(
            name=fields['name'],
            id_number=fields['id_number'],
            phone=phone,
            address=fields['address'],
        )

        return jsonify({
            'message': 'Citizen added',
            'citizen': citizen.to_dict()
        }), 200

    except LaporError as e:
        return jsonify(e.to_dict()), e.status_code
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f'Error inserting citizen: {str(e)}')
        return jsonify({'error': 'Failed to add citizen'}), 500


@citizens_bp.route('', methods=['GET'])
def list_citizens():
    """List all citizens"""
    try:
        citizens = CitizenRegistry().list_all()
        return jsonify([citizen.to_dict() for citizen in citizens]), 200

    except SQLAlchemyError as e:
        current_app.logger.error(f'Error fetching citizens: {str(e)}')
        return jsonify({'error': 'Failed to fetch citizens'}), 500


@citizens_bp.route('/<int:citizen_id>', methods=['GET'])
def get_citizen(citizen_id):
    """Get a single citizen"""
    try:
        citizen = CitizenRegistry().get(citizen_id)
        return jsonify(citizen.to_dict()), 200

    except LaporError as e:
        return jsonify(e.to_dict()), e.status_code
    except SQLAlchemyError as e:
        current_app.logger.error(f'Error fetching citizen {citizen_id}: {str(e)}')
        return jsonify({'error': 'Failed to fetch citizen'}), 500
