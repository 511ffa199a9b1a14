"""
Test Configuration and Fixtures
"""
import io

import pytest
from reportlab.pdfgen import canvas

from studydoc import create_app


@pytest.fixture(scope='function')
def upload_dir(tmp_path):
    """Transient upload folder, empty at the start of each test"""
    path = tmp_path / 'uploads'
    path.mkdir()
    return path


@pytest.fixture(scope='function')
def app(upload_dir):
    """Create application for testing"""
    app = create_app('testing')
    app.config['UPLOAD_FOLDER'] = str(upload_dir)
    app.config['MAX_CONTENT_LENGTH'] = None
    yield app


@pytest.fixture(scope='function')
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def make_pdf():
    """Build a small single-page PDF with the given lines of text"""
    def _make(*lines):
        buf = io.BytesIO()
        c = canvas.Canvas(buf)
        y = 750
        for line in lines:
            c.drawString(72, y, line)
            y -= 20
        c.showPage()
        c.save()
        return buf.getvalue()
    return _make


@pytest.fixture
def post_file(client):
    """POST bytes to /upload as the `file` field with a declared content type"""
    def _post(data: bytes, filename: str, content_type: str):
        return client.post(
            '/upload',
            data={'file': (io.BytesIO(data), filename, content_type)},
            content_type='multipart/form-data',
        )
    return _post
