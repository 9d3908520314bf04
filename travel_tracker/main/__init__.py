# travel_tracker/main/__init__.py
from flask import Blueprint

# Create the main blueprint instance
bp = Blueprint('main', __name__)


def flag_emoji(country_code):
    """Turn a two-letter country code into its flag emoji ("FR" -> regional indicators F, R)."""
    if not country_code or len(country_code) != 2 or not country_code.isalpha():
        return ''
    return ''.join(chr(0x1F1E6 + ord(letter) - ord('A')) for letter in country_code.upper())


# Register the custom filters
bp.add_app_template_filter(flag_emoji)

# Import routes at the end to avoid circular dependencies
from travel_tracker.main import routes # noqa
