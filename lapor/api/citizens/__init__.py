"""
Citizens Blueprint
"""

from lapor.api.citizens.routes import citizens_bp

__all__ = ['citizens_bp']
