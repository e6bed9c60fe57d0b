# autopaws/api/conftest.py
from unittest.mock import MagicMock

import pytest
from flask_jwt_extended import create_access_token

from autopaws import create_app

@pytest.fixture
def app():
    """Firestore 없이 가짜 서비스를 주입한 테스트 앱"""
    app = create_app('testing')
    app.services = {
        'pets': MagicMock(),
        'health_records': MagicMock(),
        'health_analysis': MagicMock(),
    }
    return app

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def auth_headers(app):
    with app.app_context():
        token = create_access_token(identity="user-1")
    return {"Authorization": f"Bearer {token}"}

def firestore_doc(data=None, doc_id="doc-1"):
    """Firestore DocumentSnapshot 흉내"""
    doc = MagicMock()
    doc.id = doc_id
    doc.exists = data is not None
    doc.to_dict.return_value = dict(data) if data is not None else None
    return doc
