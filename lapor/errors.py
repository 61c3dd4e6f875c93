"""
Domain errors
Each error carries the HTTP status the API answers with
"""


class LaporError(Exception):
    """Base error for the complaint service"""

    status_code = 500
    message = 'An unexpected error occurred'

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {'error': self.message}


# Validation errors (400)

class ValidationError(LaporError):
    status_code = 400
    message = 'Invalid input'


class MissingField(ValidationError):

    def __init__(self, field):
        self.field = field
        super().__init__(f'{field} is required')

    def to_dict(self):
        return {'error': self.message, 'field': self.field}


class InvalidIdNumber(ValidationError):
    message = 'ID number must be exactly 16 digits'


class InvalidPhone(ValidationError):
    message = 'Phone number must contain digits only'


class InvalidAttachment(ValidationError):
    message = 'Attachment must be an image of at most 5 MB'


class InvalidStatus(ValidationError):
    message = 'Unknown complaint status'


class InvalidTransition(ValidationError):

    def __init__(self, current, new):
        self.current = current
        self.new = new
        super().__init__(f'Cannot change status from {current} to {new}')


# Authentication errors

class AuthError(LaporError):
    status_code = 401
    message = 'Authentication required'


class InvalidCredentials(AuthError):
    message = 'Invalid email or password'


class AccessDenied(AuthError):
    message = 'Access denied'


class InvalidToken(AuthError):
    status_code = 400
    message = 'Invalid token'


class NotFoundError(LaporError):
    status_code = 404
    message = 'Resource not found'


class StoreError(LaporError):
    """Underlying database or file-system failure"""
    status_code = 500
    message = 'A storage error occurred'
