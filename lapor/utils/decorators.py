"""
Route decorators
"""

from functools import wraps

from flask import jsonify
from flask_jwt_extended import get_jwt, verify_jwt_in_request


def admin_required():
    """Require a valid bearer token carrying the is_admin claim"""
    def wrapper(fn):
        @wraps(fn)
        def decorator(*args, **kwargs):
            verify_jwt_in_request()
            claims = get_jwt()
            if not claims.get('is_admin'):
                return jsonify({'error': 'Access denied. Admin privileges required.'}), 403
            return fn(*args, **kwargs)
        return decorator
    return wrapper
