"""
Validation Routes (validasi)
"""

from flask import Blueprint, current_app, jsonify
from flask_jwt_extended import get_jwt_identity
from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from lapor.errors import LaporError, MissingField
from lapor.models.validation import Validation
from lapor.services.complaint_store import ComplaintStore
from lapor.utils.decorators import admin_required
from lapor.utils.request_data import get_field, parse_int, request_data

validations_bp = Blueprint('validations', __name__)


@validations_bp.route('', methods=['POST'])
@admin_required()
def validate_complaint():
    """Record that the current admin validated a complaint"""
    try:
        data = request_data()
        complaint_id = parse_int(get_field(data, 'pengaduanId', 'complaint_id'))
        if complaint_id is None:
            raise MissingField('pengaduanId')

        complaint = ComplaintStore().get(complaint_id)

        validation = Validation(
            complaint_id=complaint.id,
            admin_id=int(get_jwt_identity()),
        )
        db.session.add(validation)
        db.session.commit()

        current_app.logger.info(f'Complaint {complaint.id} validated by admin {validation.admin_id}')

        return jsonify({
            'message': 'Validation added',
            'validation': validation.to_dict()
        }), 200

    except LaporError as e:
        return jsonify(e.to_dict()), e.status_code
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f'Error inserting validation: {str(e)}')
        return jsonify({'error': 'Failed to add validation'}), 500


@validations_bp.route('/<int:complaint_id>', methods=['GET'])
@admin_required()
def list_validations(complaint_id):
    """Validation records of a complaint"""
    try:
        validations = (
            Validation.query
            .filter_by(complaint_id=complaint_id)
            .order_by(Validation.created_at.asc())
            .all()
        )
        return jsonify([validation.to_dict() for validation in validations]), 200

    except SQLAlchemyError as e:
        current_app.logger.error(f'Error fetching validations: {str(e)}')
        return jsonify({'error': 'Failed to fetch validations'}), 500
