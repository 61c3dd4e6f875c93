import io

from lapor.models import Photo
from tests.conftest import PNG_BYTES, submission_form


def create_complaint(client):
    r = client.post('/api/pengaduan', data=submission_form(), content_type='multipart/form-data')
    return r.get_json()


def test_add_photo_to_complaint(client):
    created = create_complaint(client)
    complaint_id = created['complaint']['id']

    r = client.post('/api/foto', data={
        'pengaduanId': str(complaint_id),
        'file': (io.BytesIO(PNG_BYTES), 'tambahan.png', 'image/png'),
    }, content_type='multipart/form-data')
    assert r.status_code == 200

    photo = r.get_json()['photo']
    assert photo['complaint_id'] == complaint_id
    assert photo['citizen_id'] == created['citizen']['id']
    assert photo['url'] == f"/uploads/pengaduan/{photo['file']}"

    listed = client.get(f'/api/foto/{complaint_id}').get_json()
    assert [p['id'] for p in listed] == [photo['id']]


def test_add_photo_requires_file_and_complaint(client):
    r = client.post('/api/foto', data={'pengaduanId': '1'}, content_type='multipart/form-data')
    assert r.status_code == 400

    r = client.post('/api/foto', data={
        'file': (io.BytesIO(PNG_BYTES), 'a.png', 'image/png'),
    }, content_type='multipart/form-data')
    assert r.status_code == 400


def test_add_photo_unknown_complaint(client):
    r = client.post('/api/foto', data={
        'pengaduanId': '999',
        'file': (io.BytesIO(PNG_BYTES), 'a.png', 'image/png'),
    }, content_type='multipart/form-data')
    assert r.status_code == 404
    assert Photo.query.count() == 0


def test_add_photo_rejects_non_image(client):
    complaint_id = create_complaint(client)['complaint']['id']

    r = client.post('/api/foto', data={
        'pengaduanId': str(complaint_id),
        'file': (io.BytesIO(b'hello'), 'catatan.txt', 'text/plain'),
    }, content_type='multipart/form-data')
    assert r.status_code == 400
    assert Photo.query.count() == 0


def test_list_photos_of_complaint_without_photos(client):
    complaint_id = create_complaint(client)['complaint']['id']
    assert client.get(f'/api/foto/{complaint_id}').get_json() == []


def test_missing_upload_is_404(client):
    assert client.get('/uploads/pengaduan/tidak-ada.png').status_code == 404
