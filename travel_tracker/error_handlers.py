"""
Error Handlers Module

Centralized handling for errors that escape a view:
- HTML error pages for HTTP errors
- Database errors that were not caught by the route itself
- A catch-all for unexpected exceptions outside debug mode

The tracker routes catch their own expected failures and re-render the home
page, so these handlers only see routing errors and genuine bugs.
"""

from flask import render_template, request, current_app
from werkzeug.exceptions import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from travel_tracker.extensions import db


def create_error_response(error_code, title, message, description=None):
    """
    Render the error page for `error_code`.

    Returns:
        tuple: (body, status code)
    """
    template_map = {
        404: 'errors/404.html',
        500: 'errors/500.html',
    }

    template = template_map.get(error_code, 'errors/error.html')

    try:
        return render_template(
            template,
            error_code=error_code,
            title=title,
            message=message,
            description=description
        ), error_code
    except Exception as e:
        # Fallback if template rendering fails
        current_app.logger.error(f"Error rendering error template: {e}", exc_info=True)
        return f"<h1>{error_code} {title}</h1><p>{message}</p>", error_code


# ==================== HTTP Error Handlers ====================

def handle_400(e):
    """Handle 400 Bad Request errors (including missing CSRF tokens)."""
    current_app.logger.warning(f"Bad request on {request.method} {request.path}: {e}")
    return create_error_response(
        400,
        "Bad Request",
        "The request could not be understood by the server.",
        "Please reload the page and try again."
    )


def handle_404(e):
    return create_error_response(
        404,
        "Page Not Found",
        "The page you are looking for does not exist.",
    )


def handle_405(e):
    return create_error_response(
        405,
        "Method Not Allowed",
        "This page cannot be used that way.",
        "Use the buttons on the home page instead."
    )


def handle_429(e):
    """Handle 429 Too Many Requests errors (rate limiting)."""
    current_app.logger.warning(f"Rate limit exceeded by {request.remote_addr} on {request.path}")

    description = "Please wait a moment before trying again."
    if hasattr(e, 'description') and e.description:
        description = e.description

    return create_error_response(
        429,
        "Too Many Requests",
        "You've made too many requests in a short period of time.",
        description
    )


def handle_500(e):
    """Handle 500 Internal Server Error."""
    current_app.logger.error(
        f"Internal Server Error: {str(e)}",
        exc_info=True
    )

    # In production, don't expose internal error details
    if current_app.debug:
        message = str(e)
    else:
        message = "An unexpected error occurred on our end."

    return create_error_response(500, "Internal Server Error", message)


# ==================== Database Error Handlers ====================

def handle_database_error(e):
    """Handle SQLAlchemy errors that a route did not catch."""
    current_app.logger.error(
        f"Database error: {str(e)}",
        exc_info=True
    )
    db.session.rollback()

    if current_app.debug:
        message = f"Database error: {str(e)}"
    else:
        message = "A database error occurred. Please try again."

    return create_error_response(500, "Database Error", message)


# ==================== Generic Exception Handler ====================

def handle_generic_exception(e):
    """Catch-all for exceptions no other handler claimed."""
    # Pass HTTP errors through to their specific handlers
    if isinstance(e, HTTPException):
        return e

    current_app.logger.error(
        f"Unhandled exception: {type(e).__name__}: {str(e)}",
        exc_info=True
    )

    return create_error_response(
        500,
        "Internal Server Error",
        "An unexpected error occurred.",
    )


# ==================== Registration Function ====================

def register_error_handlers(app):
    """
    Register all error handlers with the Flask application.

    Args:
        app: Flask application instance
    """
    app.register_error_handler(400, handle_400)
    app.register_error_handler(404, handle_404)
    app.register_error_handler(405, handle_405)
    app.register_error_handler(429, handle_429)
    app.register_error_handler(500, handle_500)

    app.register_error_handler(SQLAlchemyError, handle_database_error)

    # Only register catch-all outside debug to allow the debugger in development
    if not app.debug:
        app.register_error_handler(Exception, handle_generic_exception)

    app.logger.info("Error handlers registered successfully")
