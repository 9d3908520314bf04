"""Security headers and the Content Security Policy for the tracker pages."""

from flask import current_app


def build_csp_header(policy):
    """Join a {directive: [sources]} mapping into a CSP header value."""
    return '; '.join(' '.join([directive, *sources]) for directive, sources in policy.items())


def add_security_headers(response):
    """
    Add the configured headers to a response.

    Headers a view has already set are left alone. The CSP only goes on
    HTML responses; static assets such as the stylesheet go without it.
    """
    config = current_app.config

    for header, value in config.get('SECURITY_HEADERS', {}).items():
        response.headers.setdefault(header, value)

    policy = config.get('CONTENT_SECURITY_POLICY')
    if policy and response.mimetype == 'text/html':
        response.headers.setdefault('Content-Security-Policy', build_csp_header(policy))

    return response
