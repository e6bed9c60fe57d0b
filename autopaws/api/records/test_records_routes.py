# autopaws/api/records/test_records_routes.py
"""
건강 기록 API 라우트 테스트
"""

from datetime import datetime, timezone

def test_create_record(app, client, auth_headers):
    service = app.services['health_records']
    service.create_record.return_value = {
        'record_id': 'r1',
        'pet_id': 'pet-1',
        'category': 'Vaccination',
        'occurred_at': datetime(2025, 5, 1, tzinfo=timezone.utc),
        'description': 'Rabies',
        'next_due_at': None,
        'user_id': 'user-1',
    }

    response = client.post('/api/pets/pet-1/records', headers=auth_headers, json={
        'type': 'Vaccination', 'date': '2025-05-01', 'description': 'Rabies',
    })

    assert response.status_code == 201
    body = response.get_json()
    assert body['record_id'] == 'r1'
    assert 'user_id' not in body

    pet_id, user_id, data = service.create_record.call_args[0]
    assert (pet_id, user_id) == ('pet-1', 'user-1')
    assert data['category'] == 'Vaccination'
    assert data['occurred_at'] == '2025-05-01'
    assert data['status'] == 'Completed'

def test_create_record_validation_error(app, client, auth_headers):
    response = client.post('/api/pets/pet-1/records', headers=auth_headers, json={
        'category': 'Grooming', 'occurred_at': 'soon',
    })

    assert response.status_code == 400
    details = response.get_json()['details']
    assert set(details) == {'category', 'occurred_at', 'description'}
    app.services['health_records'].create_record.assert_not_called()

def test_create_record_forbidden(app, client, auth_headers):
    app.services['health_records'].create_record.side_effect = PermissionError("권한 없음")
    response = client.post('/api/pets/pet-2/records', headers=auth_headers, json={
        'category': 'Checkup', 'occurred_at': '2025-05-01', 'description': 'Annual',
    })
    assert response.status_code == 403
    assert response.get_json()['error_code'] == 'FORBIDDEN'

def test_records_require_token(client):
    response = client.get('/api/pets/pet-1/records')
    assert response.status_code == 401

def test_list_records_with_category_filter(app, client, auth_headers):
    service = app.services['health_records']
    service.list_records.return_value = {'records': [], 'meta': {'total_count': 0}}

    response = client.get('/api/pets/pet-1/records?category=weight%20check&limit=10', headers=auth_headers)

    assert response.status_code == 200
    service.list_records.assert_called_once_with('pet-1', 'user-1', 'Weight Check', 10)

def test_list_records_rejects_unknown_category(client, auth_headers):
    response = client.get('/api/pets/pet-1/records?category=grooming', headers=auth_headers)
    assert response.status_code == 400

def test_delete_record_not_found(app, client, auth_headers):
    app.services['health_records'].delete_record.side_effect = FileNotFoundError("없음")
    response = client.delete('/api/pets/pet-1/records/r404', headers=auth_headers)
    assert response.status_code == 404
    assert response.get_json()['error_code'] == 'RECORD_NOT_FOUND'

def test_delete_record(app, client, auth_headers):
    response = client.delete('/api/pets/pet-1/records/r1', headers=auth_headers)
    assert response.status_code == 200
    app.services['health_records'].delete_record.assert_called_once_with('pet-1', 'user-1', 'r1')
