"""
Tests for error handling.
Verifies the error pages, the registered handlers and the home page fallback
when the database cannot be read.
"""

import os

from config import Config, TestingConfig
from travel_tracker import create_app
from travel_tracker.extensions import db
from travel_tracker.models import User


def build_app():
    app = create_app(TestingConfig)

    @app.route('/boom')
    def boom():
        raise RuntimeError('kaboom')

    with app.app_context():
        db.create_all()
        db.session.add(User(name='Ann', color='#ff0000'))
        db.session.commit()
    return app


def test_error_templates_exist():
    """Test that all required error templates exist."""
    templates_dir = os.path.join(os.path.dirname(__file__), 'travel_tracker', 'templates', 'errors')

    for template in ['error.html', '404.html', '500.html']:
        assert os.path.exists(os.path.join(templates_dir, template)), f"{template} is missing"


def test_error_handlers_registered():
    """Test that error handlers are properly registered."""
    app = build_app()

    for code in [400, 404, 405, 429, 500]:
        assert code in app.error_handler_spec[None], f"No handler for {code}"


def test_404_error_response():
    app = build_app()

    with app.test_client() as client:
        response = client.get('/nonexistent-page-12345')

    assert response.status_code == 404
    assert b'Page Not Found' in response.data


def test_get_on_form_route_is_method_not_allowed():
    app = build_app()

    with app.test_client() as client:
        response = client.get('/add')

    assert response.status_code == 405
    assert b'Method Not Allowed' in response.data


def test_500_error_no_debug_info():
    """Unexpected exceptions render the generic page without the exception text."""
    app = build_app()

    with app.test_client() as client:
        response = client.get('/boom')

    assert response.status_code == 500
    assert b'An unexpected error occurred.' in response.data
    assert b'kaboom' not in response.data


def test_home_page_survives_missing_tables():
    """If the database cannot be read, the page still renders with empty data."""
    app = build_app()
    with app.app_context():
        db.drop_all()

    with app.test_client() as client:
        response = client.get('/')

    assert response.status_code == 200
    assert b'Error fetching data' in response.data
    assert b'Total Countries: 0' in response.data
    assert b'--visited-color: #ffffff' in response.data


def test_failed_rerender_keeps_specific_message():
    """A handler's own message wins over the generic fetch error."""
    app = build_app()
    with app.app_context():
        db.drop_all()

    with app.test_client() as client:
        response = client.post('/add', data={'country': ''})

    assert response.status_code == 200
    assert b'Country name cannot be empty, please try again' in response.data
    assert b'Error fetching data' not in response.data


def test_configuration_settings():
    app = build_app()

    assert app.config['TESTING'] is True
    assert app.config['WTF_CSRF_ENABLED'] is False
    assert app.config['DEFAULT_USER_ID'] == 1
    assert app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///:memory:'


def test_missing_database_url_is_rejected():
    class NoDatabaseConfig(TestingConfig):
        SQLALCHEMY_DATABASE_URI = None

    try:
        create_app(NoDatabaseConfig)
    except ValueError as e:
        assert 'DATABASE_URL' in str(e)
    else:
        raise AssertionError("create_app accepted a config without a database URL")


def test_csrf_tokens_do_not_expire_on_their_own():
    assert Config.WTF_CSRF_TIME_LIMIT is None


def test_missing_csrf_token_rerenders_home_page():
    """A stale or missing form token shows the home page with a message, not a bare 400 page."""
    class CsrfConfig(TestingConfig):
        WTF_CSRF_ENABLED = True

    app = create_app(CsrfConfig)
    with app.app_context():
        db.create_all()

    with app.test_client() as client:
        response = client.post('/add', data={'country': 'France'})

    assert response.status_code == 400
    assert b'The form has expired, please try again' in response.data
    assert b'Total Countries: 0' in response.data


# ==================== Rate limits ====================

class RateLimitedConfig(TestingConfig):
    RATELIMIT_ENABLED = True
    RATELIMIT_DEFAULT = "2 per minute"
    RATELIMIT_WRITE = "2 per minute"


def test_home_page_is_not_rate_limited():
    app = create_app(RateLimitedConfig)
    with app.app_context():
        db.create_all()

    with app.test_client() as client:
        statuses = [client.get('/').status_code for _ in range(5)]

    assert statuses == [200] * 5


def test_write_limit_rerenders_home_page_with_message():
    app = create_app(RateLimitedConfig)
    with app.app_context():
        db.create_all()

    with app.test_client() as client:
        for _ in range(2):
            client.post('/add', data={'country': ''})
        response = client.post('/add', data={'country': ''})

    assert response.status_code == 429
    assert b'Too many changes at once, please wait a minute and try again' in response.data
    assert b'Total Countries: 0' in response.data
    assert b'Too Many Requests' not in response.data


def test_default_limit_on_user_switch_stays_inline():
    app = create_app(RateLimitedConfig)
    with app.app_context():
        db.create_all()

    with app.test_client() as client:
        for _ in range(2):
            client.post('/user', data={'user': '1'})
        response = client.post('/user', data={'user': '1'})

    assert response.status_code == 429
    assert b'Too many changes at once' in response.data
