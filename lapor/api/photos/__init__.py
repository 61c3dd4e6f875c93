"""
Photos Blueprint
"""

from lapor.api.photos.routes import photos_bp

__all__ = ['photos_bp']
