"""
API Package
"""

# Import all blueprints for easy access
from lapor.api.citizens import citizens_bp
from lapor.api.complaints import complaints_bp
from lapor.api.photos import photos_bp
from lapor.api.validations import validations_bp
from lapor.api.admin import admin_bp

__all__ = [
    'citizens_bp',
    'complaints_bp',
    'photos_bp',
    'validations_bp',
    'admin_bp',
]
