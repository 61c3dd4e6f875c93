"""
Validations Blueprint
"""

from lapor.api.validations.routes import validations_bp

__all__ = ['validations_bp']
