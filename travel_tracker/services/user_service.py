"""
User Service - Handles family member records.
"""

import logging
from sqlalchemy import delete, select
from travel_tracker.extensions import db
from travel_tracker.exceptions import EmptyNameError, NoUserSelectedError
from travel_tracker.models import User, VisitedCountry

logger = logging.getLogger(__name__)


class UserService:
    """Service for creating, listing and deleting users."""

    @staticmethod
    def get_user(user_id):
        """Return the user with `user_id`, or None if the id is empty or unknown."""
        if not user_id:
            return None
        return db.session.get(User, user_id)

    @staticmethod
    def list_users():
        return list(db.session.scalars(select(User).order_by(User.id)))

    @staticmethod
    def create_user(name, color=None):
        """
        Insert a new user.

        Args:
            name: Display name, must not be blank
            color: CSS colour, optional

        Returns:
            User: the committed user with its generated id

        Raises:
            EmptyNameError: `name` is blank
            SQLAlchemyError: the insert failed (duplicate name, value too long, ...)
        """
        name = (name or '').strip()
        if not name:
            raise EmptyNameError("User name is empty")

        user = User(name=name, color=(color or '').strip() or None)
        db.session.add(user)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"Created user {user.id} ({user.name})")
        return user

    @staticmethod
    def delete_user(user_id):
        """
        Delete a user and all of their visited countries in one transaction.

        Raises:
            NoUserSelectedError: `user_id` is empty
            SQLAlchemyError: either delete failed; nothing is removed
        """
        if not user_id:
            raise NoUserSelectedError("No user selected")

        try:
            visits = db.session.execute(
                delete(VisitedCountry).where(VisitedCountry.user_id == user_id)
            )
            db.session.execute(delete(User).where(User.id == user_id))
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"Deleted user {user_id} and {visits.rowcount} visited countries")
