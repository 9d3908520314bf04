# travel_tracker/models/__init__.py

from travel_tracker.extensions import db

# Import models from their respective files
from .user import User
from .location import Country, VisitedCountry

__all__ = ['db', 'User', 'Country', 'VisitedCountry']
