import io

import pytest
from werkzeug.datastructures import FileStorage

from extensions import db
from lapor import create_app
from lapor.models import Admin

PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00' * 64

VALID_FORM = {
    'name': 'Ahmad',
    'idNumber': '3174012345678901',
    'lokasi': 'Jl. Merdeka',
    'deskripsi': 'Jalan berlubang',
}


@pytest.fixture
def app(tmp_path):
    app = create_app('testing')
    app.config.update(UPLOAD_FOLDER=str(tmp_path / 'uploads'))

    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(app):
    admin = Admin(name='Admin Kelurahan', email='admin@example.com', password='s3cret-pass')
    db.session.add(admin)
    db.session.commit()
    return admin


@pytest.fixture
def admin_headers(client, admin):
    r = client.post('/api/admin/login', json={'email': 'admin@example.com', 'password': 's3cret-pass'})
    assert r.status_code == 200, r.get_json()
    return {'Authorization': f"Bearer {r.get_json()['token']}"}


def make_upload(data=PNG_BYTES, filename='photo.png', content_type='image/png'):
    return FileStorage(stream=io.BytesIO(data), filename=filename, content_type=content_type)


def submission_form(**overrides):
    form = dict(VALID_FORM)
    form.update(overrides)
    return form
