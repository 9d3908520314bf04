"""
Tests for the security headers and Content Security Policy on responses.
"""

from config import Config, TestingConfig
from travel_tracker import create_app
from travel_tracker.extensions import db
from travel_tracker.security import build_csp_header


class HeadersConfig(TestingConfig):
    SECURITY_HEADERS = Config.SECURITY_HEADERS
    CONTENT_SECURITY_POLICY = Config.CONTENT_SECURITY_POLICY


def test_security_headers():
    """Test that security headers are properly applied to responses."""
    app = create_app(HeadersConfig)
    with app.app_context():
        db.create_all()

    with app.test_client() as client:
        response = client.get('/')

    for header_name, expected_value in Config.SECURITY_HEADERS.items():
        assert response.headers.get(header_name) == expected_value, header_name

    csp = response.headers.get('Content-Security-Policy')
    assert csp is not None
    assert "default-src 'self'" in csp
    assert "frame-ancestors 'none'" in csp


def test_headers_also_on_error_pages():
    app = create_app(HeadersConfig)

    with app.test_client() as client:
        response = client.get('/does-not-exist')

    assert response.status_code == 404
    assert response.headers.get('X-Frame-Options') == 'SAMEORIGIN'


def test_testing_config_sends_no_csp():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()

    with app.test_client() as client:
        response = client.get('/')

    assert 'Content-Security-Policy' not in response.headers


def test_build_csp_header():
    header = build_csp_header({
        'default-src': ["'self'"],
        'img-src': ["'self'", "data:"],
        'upgrade-insecure-requests': [],
    })

    assert header == "default-src 'self'; img-src 'self' data:; upgrade-insecure-requests"


def test_view_headers_are_not_overwritten():
    app = create_app(HeadersConfig)

    @app.route('/framed')
    def framed():
        return 'ok', 200, {'X-Frame-Options': 'DENY'}

    with app.test_client() as client:
        response = client.get('/framed')

    assert response.headers.get('X-Frame-Options') == 'DENY'
    assert response.headers.get('X-Content-Type-Options') == 'nosniff'


def test_stylesheet_gets_headers_but_no_csp():
    app = create_app(HeadersConfig)

    with app.test_client() as client:
        response = client.get('/static/styles/main.css')

    assert response.status_code == 200
    assert response.headers.get('X-Content-Type-Options') == 'nosniff'
    assert 'Content-Security-Policy' not in response.headers
    response.close()
