import io
import os

import pytest
from PIL import Image

from lapor.models import Citizen, Complaint, Photo
from lapor.errors import StoreError
from lapor.services.storage_service import LocalStorageService
from tests.conftest import PNG_BYTES, submission_form


def post_complaint(client, form=None, image=None):
    data = dict(form or submission_form())
    if image is not None:
        data['image'] = image
    return client.post('/api/pengaduan', data=data, content_type='multipart/form-data')


def png_image():
    return (io.BytesIO(PNG_BYTES), 'jalan.png', 'image/png')


def test_submit_without_image(client):
    r = post_complaint(client)
    assert r.status_code == 201, r.get_json()

    body = r.get_json()
    assert body['complaint']['status'] == 'pending'
    assert body['complaint']['description'] == 'Jalan berlubang'
    assert body['complaint']['location'] == 'Jl. Merdeka'
    assert body['attachment_url'] is None
    assert body['citizen']['id_number'] == '3174012345678901'
    assert isinstance(body['citizen']['id_number'], str)


def test_submit_accepts_json_body(client):
    r = client.post('/api/pengaduan', json=submission_form())
    assert r.status_code == 201
    assert Complaint.query.count() == 1


def test_submit_accepts_numeric_id_number_in_json(client):
    r = client.post('/api/pengaduan', json=submission_form(idNumber=3174012345678901))
    assert r.status_code == 201, r.get_json()
    assert r.get_json()['citizen']['id_number'] == '3174012345678901'


def test_submit_numeric_name_in_json(client):
    r = client.post('/api/pengaduan', json=submission_form(name=123))
    assert r.status_code == 201, r.get_json()
    assert r.get_json()['citizen']['name'] == '123'


def test_submit_short_numeric_id_number_in_json(client):
    r = client.post('/api/pengaduan', json=submission_form(idNumber=12345))
    assert r.status_code == 400
    assert Citizen.query.count() == 0
    assert Complaint.query.count() == 0


def test_submit_reuses_registered_citizen(client):
    first = post_complaint(client).get_json()
    second = post_complaint(client, submission_form(deskripsi='Got mampet')).get_json()

    assert Citizen.query.count() == 1
    assert Complaint.query.count() == 2
    assert second['citizen']['id'] == first['citizen']['id']
    assert second['complaint']['citizen_id'] == first['citizen']['id']


@pytest.mark.parametrize('id_number', [
    '12345',
    '31740123456789012',
    'abcdefghijklmnop',
    '317401234567890a',
    ' 3174012345678901 ',
    '3174012345678901\n',
    '3174 0123 4567 8901',
])
def test_malformed_id_number_is_rejected_without_writes(client, id_number):
    for _ in range(2):
        r = post_complaint(client, submission_form(idNumber=id_number))
        assert r.status_code == 400
        assert 'error' in r.get_json()

    assert Citizen.query.count() == 0
    assert Complaint.query.count() == 0


@pytest.mark.parametrize('field, reported', [
    ('name', 'name'),
    ('deskripsi', 'description'),
    ('idNumber', 'id_number'),
    ('lokasi', 'location'),
])
def test_missing_field(client, field, reported):
    form = submission_form()
    del form[field]

    r = post_complaint(client, form)
    assert r.status_code == 400
    assert r.get_json()['field'] == reported
    assert Citizen.query.count() == 0


def test_phone_must_be_digits(client, app):
    r = post_complaint(client, submission_form(phone='0812-3456'))
    assert r.status_code == 400
    assert Citizen.query.count() == 0

    app.config['PHONE_ALLOW_SEPARATORS'] = True
    r = post_complaint(client, submission_form(phone='0812-3456 78'))
    assert r.status_code == 201
    assert r.get_json()['citizen']['phone'] == '0812345678'


def test_submit_with_image_stores_file(client, app):
    r = post_complaint(client, image=png_image())
    assert r.status_code == 201, r.get_json()

    url = r.get_json()['attachment_url']
    assert url.startswith('/uploads/pengaduan/')
    filename = url.rsplit('/', 1)[1]
    assert os.path.exists(os.path.join(app.config['UPLOAD_FOLDER'], 'pengaduan', filename))

    served = client.get(url)
    assert served.status_code == 200
    assert served.data == PNG_BYTES


def test_submit_with_public_base_url(client, app):
    app.config['PUBLIC_BASE_URL'] = 'http://localhost:5000/'
    r = post_complaint(client, image=png_image())
    assert r.get_json()['attachment_url'].startswith('http://localhost:5000/uploads/pengaduan/')


def test_submit_with_inline_storage(client, app):
    app.config['ATTACHMENT_STORAGE'] = 'inline'
    r = post_complaint(client, image=png_image())
    assert r.status_code == 201

    url = r.get_json()['attachment_url']
    assert url.startswith('data:image/png;base64,')
    assert not os.path.exists(os.path.join(app.config['UPLOAD_FOLDER'], 'pengaduan'))

    listed = client.get('/api/pengaduan').get_json()
    assert listed[0]['photos'][0]['url'] == url


def test_submit_compresses_decodable_images(client, app):
    app.config['COMPRESS_UPLOADS'] = True

    buffer = io.BytesIO()
    Image.new('RGBA', (64, 48), (255, 0, 0, 128)).save(buffer, format='PNG')
    buffer.seek(0)

    r = post_complaint(client, image=(buffer, 'foto.png', 'image/png'))
    assert r.status_code == 201
    assert r.get_json()['attachment_url'].endswith('.jpg')

    # undecodable payloads are stored untouched
    r = post_complaint(client, image=png_image())
    assert r.get_json()['attachment_url'].endswith('.png')


def test_non_image_upload_is_rejected_before_writes(client):
    r = post_complaint(client, image=(io.BytesIO(b'%PDF-1.4'), 'surat.pdf', 'application/pdf'))
    assert r.status_code == 400
    assert Citizen.query.count() == 0
    assert Complaint.query.count() == 0


def test_oversized_image_is_rejected(client, app):
    app.config['MAX_ATTACHMENT_BYTES'] = 1024
    r = post_complaint(client, image=(io.BytesIO(b'\x00' * 2048), 'besar.png', 'image/png'))
    assert r.status_code == 400
    assert Complaint.query.count() == 0


def test_photo_write_failure_keeps_complaint(client, monkeypatch):
    def fail(self, file):
        raise StoreError('Failed to store photo')

    monkeypatch.setattr(LocalStorageService, 'save', fail)

    r = post_complaint(client, image=png_image())
    assert r.status_code == 500
    assert r.get_json() == {'error': 'Failed to store photo'}
    assert Complaint.query.count() == 1
    assert Photo.query.count() == 0


def test_list_round_trip_and_status_update(client):
    created = post_complaint(client).get_json()['complaint']

    listed = client.get('/api/pengaduan').get_json()
    assert len(listed) == 1
    assert listed[0]['id'] == created['id']
    assert listed[0]['description'] == 'Jalan berlubang'
    assert listed[0]['location'] == 'Jl. Merdeka'
    assert listed[0]['status'] == 'pending'
    assert listed[0]['updated_at'] is None
    assert listed[0]['citizen']['id_number'] == '3174012345678901'
    assert listed[0]['photos'] == []

    r = client.put(f"/api/pengaduan/{created['id']}", json={'status': 'in-progress', 'response': 'Segera diperbaiki'})
    assert r.status_code == 200
    first_update = r.get_json()['complaint']['updated_at']
    assert first_update is not None

    r = client.put(f"/api/pengaduan/{created['id']}", json={'status': 'completed'})
    assert r.status_code == 200

    listed = client.get('/api/pengaduan').get_json()
    assert listed[0]['status'] == 'completed'
    assert listed[0]['response'] == 'Segera diperbaiki'
    assert listed[0]['updated_at'] >= first_update


def test_list_newest_first_and_filter(client):
    first = post_complaint(client).get_json()['complaint']
    second = post_complaint(client, submission_form(deskripsi='Banjir')).get_json()['complaint']
    client.put(f"/api/pengaduan/{first['id']}", json={'status': 'rejected'})

    listed = client.get('/api/pengaduan').get_json()
    assert [c['id'] for c in listed] == [second['id'], first['id']]

    pending = client.get('/api/pengaduan?status=pending').get_json()
    assert [c['id'] for c in pending] == [second['id']]

    everything = client.get('/api/pengaduan?status=all').get_json()
    assert len(everything) == 2

    assert client.get('/api/pengaduan?status=archived').status_code == 400


def test_get_single_complaint(client):
    created = post_complaint(client).get_json()['complaint']

    r = client.get(f"/api/pengaduan/{created['id']}")
    assert r.status_code == 200
    assert r.get_json()['citizen']['name'] == 'Ahmad'

    assert client.get('/api/pengaduan/999').status_code == 404


def test_stats(client):
    post_complaint(client)
    created = post_complaint(client).get_json()['complaint']
    client.put(f"/api/pengaduan/{created['id']}", json={'status': 'completed'})

    stats = client.get('/api/pengaduan/stats').get_json()['statistics']
    assert stats['pending'] == 1
    assert stats['completed'] == 1
    assert stats['total'] == 2


def test_update_missing_complaint_is_404(client):
    post_complaint(client)

    r = client.put('/api/pengaduan/999', json={'status': 'completed'})
    assert r.status_code == 404
    assert Complaint.query.one().status.value == 'pending'


def test_update_requires_valid_status(client):
    created = post_complaint(client).get_json()['complaint']

    r = client.put(f"/api/pengaduan/{created['id']}", json={'response': 'ok'})
    assert r.status_code == 400
    assert r.get_json()['field'] == 'status'

    r = client.put(f"/api/pengaduan/{created['id']}", json={'status': 'archived'})
    assert r.status_code == 400


def test_any_transition_allowed_by_default(client):
    created = post_complaint(client).get_json()['complaint']
    client.put(f"/api/pengaduan/{created['id']}", json={'status': 'completed'})

    r = client.put(f"/api/pengaduan/{created['id']}", json={'status': 'pending'})
    assert r.status_code == 200
    assert r.get_json()['complaint']['status'] == 'pending'


def test_transition_policy_when_enforced(client, app):
    app.config['ENFORCE_STATUS_TRANSITIONS'] = True
    created = post_complaint(client).get_json()['complaint']

    assert client.put(f"/api/pengaduan/{created['id']}", json={'status': 'completed'}).status_code == 200

    r = client.put(f"/api/pengaduan/{created['id']}", json={'status': 'pending'})
    assert r.status_code == 400
    assert Complaint.query.one().status.value == 'completed'

    assert client.put('/api/pengaduan/999', json={'status': 'completed'}).status_code == 404
