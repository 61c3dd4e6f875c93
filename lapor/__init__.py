"""
Flask Application Factory
"""

import os

from flask import Flask, jsonify, send_from_directory
from werkzeug.exceptions import HTTPException

from config import config
from extensions import db, migrate, jwt, bcrypt, cors, limiter
from lapor.errors import AccessDenied, InvalidToken
from lapor.utils.logger import init_logging


def create_app(config_name=None):
    """Application factory pattern"""

    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config.get(config_name, config['default']))

    init_logging(app)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    bcrypt.init_app(app)
    cors.init_app(app, resources={
        r"/api/*": {
            "origins": app.config['CORS_ORIGINS'],
            "methods": ["GET", "POST", "PUT", "OPTIONS"],
            "allow_headers": ["Content-Type", "Authorization"],
            "supports_credentials": True,
        },
        r"/uploads/*": {"origins": app.config['CORS_ORIGINS']},
    })
    limiter.init_app(app)

    register_jwt_handlers()

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Create database tables
    with app.app_context():
        from lapor import models  # noqa: F401

        uri = app.config['SQLALCHEMY_DATABASE_URI']
        if uri.startswith('sqlite:///') and ':memory:' not in uri:
            os.makedirs(os.path.dirname(uri.replace('sqlite:///', '', 1)) or '.', exist_ok=True)
        db.create_all()

    app.logger.info(f'Lapor API started with {config_name} configuration')
    return app


def register_jwt_handlers():
    """JSON bodies for missing or rejected admin tokens"""

    @jwt.unauthorized_loader
    def missing_token(reason):
        error = AccessDenied()
        return jsonify(error.to_dict()), error.status_code

    @jwt.invalid_token_loader
    def invalid_token(reason):
        error = InvalidToken()
        return jsonify(error.to_dict()), error.status_code

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify({'error': 'Token has expired'}), 401


def register_blueprints(app):
    """Register Flask blueprints"""
    from lapor.api import (
        citizens_bp,
        complaints_bp,
        photos_bp,
        validations_bp,
        admin_bp,
    )

    app.register_blueprint(citizens_bp, url_prefix='/api/masyarakat')
    app.register_blueprint(complaints_bp, url_prefix='/api/pengaduan')
    app.register_blueprint(photos_bp, url_prefix='/api/foto')
    app.register_blueprint(validations_bp, url_prefix='/api/validasi')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')

    # Health check endpoint
    @app.route('/health')
    def health_check():
        return jsonify({'status': 'healthy', 'message': 'API is running'}), 200

    @app.route('/')
    def index():
        return jsonify({
            'message': 'Lapor complaint API',
            'version': '1.0.0',
            'endpoints': {
                'citizens': '/api/masyarakat',
                'complaints': '/api/pengaduan',
                'photos': '/api/foto',
                'validations': '/api/validasi',
                'admin': '/api/admin'
            }
        }), 200

    @app.route('/uploads/pengaduan/<path:filename>')
    def uploaded_photo(filename):
        """Serve locally stored complaint photos"""
        folder = os.path.join(app.config['UPLOAD_FOLDER'], 'pengaduan')
        return send_from_directory(folder, filename)


def register_error_handlers(app):
    """Register error handlers"""

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({'error': 'Bad Request', 'message': str(error)}), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Not Found', 'message': 'Resource not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method Not Allowed'}), 405

    @app.errorhandler(413)
    def request_too_large(error):
        return jsonify({'error': 'Request body too large'}), 413

    @app.errorhandler(429)
    def rate_limited(error):
        return jsonify({'error': 'Too many requests', 'message': str(error.description)}), 429

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        return jsonify({'error': 'Internal Server Error', 'message': 'An unexpected error occurred'}), 500

    @app.errorhandler(Exception)
    def handle_exception(error):
        if isinstance(error, HTTPException):
            return jsonify({'error': error.name, 'message': error.description}), error.code
        db.session.rollback()
        app.logger.exception(f'Unhandled exception: {str(error)}')
        return jsonify({'error': 'Internal Server Error', 'message': 'An unexpected error occurred'}), 500
