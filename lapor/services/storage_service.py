"""
Photo Storage Service
Saves uploaded complaint photos either to the local uploads folder
or inline as a base64 data: URI stored in the database
"""

import base64
import io
import os
import uuid

from flask import current_app
from PIL import Image, UnidentifiedImageError
from werkzeug.utils import secure_filename

from lapor.errors import StoreError

COMPLAINT_FOLDER = 'pengaduan'
COMPRESSIBLE_EXTENSIONS = {'jpg', 'jpeg', 'png'}


def file_extension(file):
    """Extension from the uploaded file name, falling back to the mimetype"""
    filename = secure_filename(file.filename or '')
    if '.' in filename:
        return filename.rsplit('.', 1)[1].lower()
    subtype = (file.mimetype or 'image/jpeg').split('/', 1)[-1]
    return 'jpg' if subtype == 'jpeg' else subtype.lower()


def compress_image(image_file, max_size=(1920, 1080), quality=85):
    """
    Compress and resize image

    Args:
        image_file: File object or bytes stream
        max_size: Max dimensions (width, height)
        quality: JPEG quality (1-100)

    Returns:
        Compressed JPEG as a BytesIO, or None if the payload is not a decodable image
    """
    try:
        img = Image.open(image_file)

        # Convert RGBA to RGB if necessary
        if img.mode in ('RGBA', 'LA', 'P'):
            background = Image.new('RGB', img.size, (255, 255, 255))
            if img.mode == 'P':
                img = img.convert('RGBA')
            background.paste(img, mask=img.split()[-1] if img.mode in ('RGBA', 'LA') else None)
            img = background
        elif img.mode != 'RGB':
            img = img.convert('RGB')

        img.thumbnail(max_size, Image.Resampling.LANCZOS)

        output = io.BytesIO()
        img.save(output, format='JPEG', quality=quality, optimize=True)
        output.seek(0)
        return output
    except (UnidentifiedImageError, OSError, ValueError) as e:
        current_app.logger.warning(f'Image compression skipped: {str(e)}')
        return None


class LocalStorageService:
    """Store photos under UPLOAD_FOLDER/pengaduan and keep only the file name"""

    name = 'local'

    @staticmethod
    def upload_folder():
        folder = os.path.join(current_app.config['UPLOAD_FOLDER'], COMPLAINT_FOLDER)
        os.makedirs(folder, exist_ok=True)
        return folder

    def save(self, file):
        """
        Save file locally

        Returns:
            Stored file name, relative to the complaint uploads folder
        """
        file_ext = file_extension(file)
        payload = None

        if current_app.config.get('COMPRESS_UPLOADS') and file_ext in COMPRESSIBLE_EXTENSIONS:
            payload = compress_image(file.stream)
            if payload:
                file_ext = 'jpg'
            else:
                file.stream.seek(0)

        filename = f"{uuid.uuid4().hex}.{file_ext}"

        try:
            file_path = os.path.join(self.upload_folder(), filename)
            if payload:
                with open(file_path, 'wb') as out:
                    out.write(payload.getvalue())
            else:
                file.save(file_path)
        except OSError as e:
            current_app.logger.error(f'Local upload error: {str(e)}')
            raise StoreError('Failed to store photo') from e

        return filename


class InlineStorageService:
    """Keep photos inline as data: URIs; nothing touches the file system"""

    name = 'inline'

    def save(self, file):
        file.stream.seek(0)
        content = file.stream.read()
        mimetype = file.mimetype or 'application/octet-stream'
        encoded = base64.b64encode(content).decode('ascii')
        return f'data:{mimetype};base64,{encoded}'


STORAGE_BACKENDS = {
    LocalStorageService.name: LocalStorageService,
    InlineStorageService.name: InlineStorageService,
}


def get_storage_service(name=None):
    """Storage backend selected by ATTACHMENT_STORAGE"""
    name = name or current_app.config.get('ATTACHMENT_STORAGE', 'local')
    try:
        return STORAGE_BACKENDS[name]()
    except KeyError:
        raise ValueError(f'Unknown attachment storage: {name}')
