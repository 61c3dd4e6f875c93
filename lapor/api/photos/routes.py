"""
Photo Routes (foto)
"""

from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from lapor.errors import LaporError
from lapor.services.attachment_store import AttachmentStore
from lapor.services.complaint_store import ComplaintStore
from lapor.services.submission_workflow import has_upload
from lapor.utils.request_data import get_field, parse_int
from lapor.utils.validators import DEFAULT_MAX_ATTACHMENT_BYTES, validate_image

photos_bp = Blueprint('photos', __name__)


@photos_bp.route('', methods=['POST'])
def add_photo():
    """Attach a photo to an existing complaint"""
    try:
        file = request.files.get('file')
        complaint_id = parse_int(get_field(request.form, 'pengaduanId', 'complaint_id'))

        if not has_upload(file) or complaint_id is None:
            return jsonify({'error': 'File and complaint ID are required'}), 400

        validate_image(
            file,
            current_app.config.get('MAX_ATTACHMENT_BYTES', DEFAULT_MAX_ATTACHMENT_BYTES),
        )
        complaint = ComplaintStore().get(complaint_id)

        photo = AttachmentStore().create(
            complaint_id=complaint.id,
            citizen_id=complaint.citizen_id,
            file=file,
        )

        return jsonify({
            'message': 'Photo added',
            'photo': photo.to_dict()
        }), 200

    except LaporError as e:
        if e.status_code >= 500:
            db.session.rollback()
        return jsonify(e.to_dict()), e.status_code
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f'Error inserting photo: {str(e)}')
        return jsonify({'error': 'Failed to add photo'}), 500


@photos_bp.route('/<int:complaint_id>', methods=['GET'])
def list_photos(complaint_id):
    """Photos attached to a complaint"""
    try:
        photos = AttachmentStore().list_for_complaint(complaint_id)
        return jsonify([photo.to_dict() for photo in photos]), 200

    except SQLAlchemyError as e:
        current_app.logger.error(f'Error fetching photos: {str(e)}')
        return jsonify({'error': 'Failed to fetch photos'}), 500
