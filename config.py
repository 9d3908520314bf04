import os
from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(__file__))
# Use override=True to ensure .env values override any system environment variables
load_dotenv(os.path.join(basedir, '.env'), override=True)


def normalize_database_url(url):
    """Hosted Postgres providers hand out postgres:// URLs, SQLAlchemy only accepts postgresql://."""
    if url and url.startswith('postgres://'):
        return 'postgresql://' + url[len('postgres://'):]
    return url


def build_engine_options(pool_size, max_overflow, sslmode=None):
    options = {
        'pool_size': pool_size,    # Number of persistent connections to maintain
        'max_overflow': max_overflow,  # Additional connections allowed when pool is full
        'pool_timeout': 30,        # Seconds to wait for a connection before error
        'pool_recycle': 1800,      # Recycle connections after 30 minutes (avoid stale connections)
        'pool_pre_ping': True,     # Check connection health before use
    }
    if sslmode:
        options['connect_args'] = {'sslmode': sslmode}
    return options


class Config:
    ENV = 'development'
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'

    WTF_CSRF_ENABLED = True
    # Tokens are bound to the session cookie and never expire on their own
    WTF_CSRF_TIME_LIMIT = None
    WTF_CSRF_SSL_STRICT = False

    # The selected user lives in the signed session cookie
    SESSION_COOKIE_SECURE = os.environ.get('SESSION_COOKIE_SECURE', 'False').lower() == 'true'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Tracker behaviour
    DEFAULT_USER_ID = int(os.environ.get('DEFAULT_USER_ID', 1))
    PORT = int(os.environ.get('PORT', 4000))

    SECURITY_HEADERS = {
        'X-Content-Type-Options': 'nosniff',
        'X-Frame-Options': 'SAMEORIGIN',
        'Referrer-Policy': 'strict-origin-when-cross-origin',
        'Permissions-Policy': 'geolocation=(), microphone=(), camera=()',
        'Cross-Origin-Opener-Policy': 'same-origin',
        'Cross-Origin-Resource-Policy': 'same-origin',
    }

    CONTENT_SECURITY_POLICY = {
        'default-src': ["'self'"],
        # The page tints visited countries through an inline CSS variable
        'style-src': ["'self'", "'unsafe-inline'"],
        'img-src': ["'self'", "data:"],
        'object-src': ["'none'"],
        'base-uri': ["'self'"],
        'form-action': ["'self'"],
        'frame-ancestors': ["'none'"],
    }

    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_STRATEGY = "fixed-window"
    RATELIMIT_HEADERS_ENABLED = True
    # Applies to switching users; the home page is exempt
    RATELIMIT_DEFAULT = "1000 per day;200 per hour"

    # Write routes (add country, create/delete user)
    RATELIMIT_WRITE = "30 per minute"

    SQLALCHEMY_DATABASE_URI = normalize_database_url(os.environ.get('DATABASE_URL'))
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    DATABASE_SSLMODE = os.environ.get('DATABASE_SSLMODE')

    SQLALCHEMY_ENGINE_OPTIONS = build_engine_options(10, 20, DATABASE_SSLMODE)

    # Logging
    LOG_TO_FILE = os.environ.get('LOG_TO_FILE', 'true').lower() == 'true'

    PROPAGATE_EXCEPTIONS = None  # Let Flask decide based on DEBUG
    TRAP_HTTP_EXCEPTIONS = False
    TRAP_BAD_REQUEST_ERRORS = None


class DevelopmentConfig(Config):
    """Development environment configuration with relaxed security for debugging."""
    ENV = 'development'
    DEBUG = True
    TESTING = False

    SESSION_COOKIE_SECURE = False

    PROPAGATE_EXCEPTIONS = False  # Use Flask's error handlers
    TRAP_BAD_REQUEST_ERRORS = True


class ProductionConfig(Config):
    """Production environment configuration."""
    ENV = 'production'
    DEBUG = False
    TESTING = False

    # Hosted databases usually require TLS but ship certificates we do not verify
    DATABASE_SSLMODE = os.environ.get('DATABASE_SSLMODE', 'require')
    SQLALCHEMY_ENGINE_OPTIONS = build_engine_options(20, 40, DATABASE_SSLMODE)

    SESSION_COOKIE_SECURE = True
    WTF_CSRF_SSL_STRICT = True

    # Production: Never expose error details
    PROPAGATE_EXCEPTIONS = False
    TRAP_HTTP_EXCEPTIONS = False
    TRAP_BAD_REQUEST_ERRORS = False


class TestingConfig(Config):
    """Testing environment configuration."""
    ENV = 'testing'
    TESTING = True
    DEBUG = False

    # Testing: Use in-memory database
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}

    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False

    SECURITY_HEADERS = {}
    CONTENT_SECURITY_POLICY = {}

    LOG_TO_FILE = False


# Configuration dictionary for easy selection
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
