# travel_tracker/services/__init__.py
"""
Service layer for the travel tracker.

Routes call these services instead of querying models directly, so every
read and write against `users`, `countries` and `visited_countries` lives here.
"""

from .user_service import UserService
from .visit_service import VisitService

__all__ = ['UserService', 'VisitService']
