"""
Admin Routes
"""

from flask import Blueprint, current_app, jsonify
from flask_jwt_extended import create_access_token
from sqlalchemy.exc import SQLAlchemyError

from extensions import db, limiter
from lapor.errors import InvalidCredentials, LaporError
from lapor.models.admin import Admin
from lapor.utils.request_data import get_field, request_data
from lapor.utils.validators import validate_required

admin_bp = Blueprint('admin', __name__)


def _login_limit():
    return current_app.config.get('ADMIN_LOGIN_LIMIT', '20 per hour')


@admin_bp.route('/login', methods=['POST'])
@limiter.limit(_login_limit)
def admin_login():
    """Admin login; returns a bearer token"""
    try:
        data = request_data()
        email = get_field(data, 'email')
        password = data.get('password')

        if not email or not password:
            return jsonify({'error': 'Email and password are required'}), 400

        admin = Admin.query.filter_by(email=email.lower()).first()

        if not admin or not admin.check_password(password):
            current_app.logger.warning('Rejected admin login attempt')
            raise InvalidCredentials()

        admin.update_last_login()

        # No expiry unless JWT_ACCESS_TOKEN_EXPIRES_MINUTES is configured
        token = create_access_token(
            identity=str(admin.id),
            additional_claims={'is_admin': True}
        )
        current_app.logger.info(f'Admin {admin.id} logged in')

        return jsonify({
            'message': 'Login successful',
            'token': token,
            'admin': admin.to_dict()
        }), 200

    except LaporError as e:
        return jsonify(e.to_dict()), e.status_code
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f'Error during admin login: {str(e)}')
        return jsonify({'error': 'Login failed'}), 500


@admin_bp.route('', methods=['POST'])
def create_admin():
    """Create an admin account"""
    try:
        data = request_data()
        fields = {
            'nama': get_field(data, 'nama', 'name'),
            'email': get_field(data, 'email'),
            'password': data.get('password'),
        }
        validate_required(fields, ('nama', 'password', 'email'))

        email = fields['email'].lower()
        if Admin.query.filter_by(email=email).first():
            return jsonify({'error': 'Email already registered'}), 409

        admin = Admin(
            name=fields['nama'],
            email=email,
            password=fields['password'],
        )
        db.session.add(admin)
        db.session.commit()

        current_app.logger.info(f'Admin {admin.id} created')

        return jsonify({
            'message': 'Admin added',
            'admin': admin.to_dict()
        }), 200

    except LaporError as e:
        return jsonify(e.to_dict()), e.status_code
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f'Error inserting admin: {str(e)}')
        return jsonify({'error': 'Failed to add admin'}), 500
