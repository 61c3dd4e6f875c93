"""
Complaint Routes (pengaduan)
"""

from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from lapor.errors import LaporError, MissingField
from lapor.services.complaint_store import ComplaintStore, parse_status
from lapor.services.status_policy import StatusTransitionPolicy
from lapor.services.submission_workflow import SubmissionWorkflow
from lapor.utils.request_data import get_field, request_data

complaints_bp = Blueprint('complaints', __name__)


@complaints_bp.route('', methods=['POST'])
def submit_complaint():
    """Submit a new complaint, optionally with a photo"""
    try:
        data = request_data()

        result = SubmissionWorkflow().submit(
            name=get_field(data, 'name', 'nama'),
            id_number=get_field(data, 'idNumber', 'id_number', 'nik', strip=False),
            phone=get_field(data, 'phone', 'no_hp'),
            location=get_field(data, 'lokasi', 'location'),
            description=get_field(data, 'deskripsi', 'description'),
            image=request.files.get('image'),
        )

        return jsonify({
            'message': 'Complaint submitted successfully',
            **result.to_dict()
        }), 201

    except LaporError as e:
        if e.status_code >= 500:
            db.session.rollback()
        return jsonify(e.to_dict()), e.status_code
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f'Error saving complaint: {str(e)}')
        return jsonify({'error': 'Failed to submit complaint'}), 500


@complaints_bp.route('', methods=['GET'])
def list_complaints():
    """List complaints newest first, with citizen and photos"""
    try:
        status = request.args.get('status')
        if status in (None, '', 'all'):
            status = None

        complaints = ComplaintStore().list_all(status=status)

        return jsonify([
            complaint.to_dict(include_citizen=True, include_photos=True)
            for complaint in complaints
        ]), 200

    except LaporError as e:
        return jsonify(e.to_dict()), e.status_code
    except SQLAlchemyError as e:
        current_app.logger.error(f'Error fetching complaints: {str(e)}')
        return jsonify({'error': 'Failed to fetch complaints'}), 500


@complaints_bp.route('/stats', methods=['GET'])
def complaint_stats():
    """Complaint counts per status"""
    try:
        return jsonify({'statistics': ComplaintStore().status_counts()}), 200

    except SQLAlchemyError as e:
        current_app.logger.error(f'Error counting complaints: {str(e)}')
        return jsonify({'error': 'Failed to fetch statistics'}), 500


@complaints_bp.route('/<int:complaint_id>', methods=['GET'])
def get_complaint(complaint_id):
    """Get a single complaint"""
    try:
        complaint = ComplaintStore().get(complaint_id)
        return jsonify(complaint.to_dict(include_citizen=True, include_photos=True)), 200

    except LaporError as e:
        return jsonify(e.to_dict()), e.status_code
    except SQLAlchemyError as e:
        current_app.logger.error(f'Error fetching complaint {complaint_id}: {str(e)}')
        return jsonify({'error': 'Failed to fetch complaint'}), 500


@complaints_bp.route('/<int:complaint_id>', methods=['PUT'])
def update_complaint(complaint_id):
    """Update complaint status and optional administrator response"""
    try:
        data = request_data()

        status = get_field(data, 'status')
        if not status:
            raise MissingField('status')
        response = data.get('response')

        store = ComplaintStore()
        if current_app.config.get('ENFORCE_STATUS_TRANSITIONS'):
            new_status = parse_status(status)
            StatusTransitionPolicy().check(store.get(complaint_id).status, new_status)

        complaint = store.update_status(complaint_id, status, response=response)
        current_app.logger.info(f'Complaint {complaint.id} set to {complaint.status.value}')

        return jsonify({
            'message': 'Complaint updated',
            'complaint': complaint.to_dict()
        }), 200

    except LaporError as e:
        return jsonify(e.to_dict()), e.status_code
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f'Error updating complaint {complaint_id}: {str(e)}')
        return jsonify({'error': 'Failed to update complaint'}), 500
