"""
Visit Service - Handles country lookup and the visited-countries list.
"""

import logging
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from travel_tracker.extensions import db
from travel_tracker.constants import TrackerConstants
from travel_tracker.exceptions import (
    CountryAlreadyVisitedError,
    CountryNotFoundError,
    EmptyNameError,
    NoUserSelectedError,
)
from travel_tracker.models import Country, User, VisitedCountry

logger = logging.getLogger(__name__)


class VisitService:
    """Service for reading and recording the countries a user has visited."""

    @staticmethod
    def visited_codes(user_id):
        """Return the country codes visited by `user_id`, in insertion order."""
        if not user_id:
            return []
        return list(db.session.scalars(
            select(VisitedCountry.country_code)
            .where(VisitedCountry.user_id == user_id)
            .order_by(VisitedCountry.id)
        ))

    @staticmethod
    def find_country(name):
        """
        Look up a country by case-insensitive name.

        An exact name match wins. Otherwise the first country (by name) whose
        name contains `name` is returned.

        Raises:
            EmptyNameError: `name` is blank
            CountryNotFoundError: no country name contains `name`
        """
        term = (name or '').strip().lower()
        if not term:
            raise EmptyNameError("Country name is empty")

        # PostgreSQL lower() folds any letter; SQLite's only folds ASCII (so "ÅLAND" != "åland" there)
        lowered_name = func.lower(Country.country_name, type_=db.String)

        country = db.session.scalar(
            select(Country).where(lowered_name == term).limit(1)
        )
        if country is None:
            country = db.session.scalar(
                select(Country)
                .where(lowered_name.contains(term, autoescape=True))
                .order_by(Country.country_name, Country.id)
                .limit(1)
            )

        if country is None:
            raise CountryNotFoundError(f"No country matches '{name}'")
        return country

    @staticmethod
    def resolve_code(country_code):
        """Apply the stored-code remap (e.g. British Indian Ocean Territory is shown as India)."""
        return TrackerConstants.COUNTRY_CODE_REMAP.get(country_code, country_code)

    @staticmethod
    def has_visited(user_id, country_code):
        return db.session.scalar(
            select(VisitedCountry.id).where(
                VisitedCountry.user_id == user_id,
                VisitedCountry.country_code == country_code
            )
        ) is not None

    @staticmethod
    def add_visit(user_id, country_name):
        """
        Record that `user_id` visited the country matching `country_name`.

        Returns:
            VisitedCountry: the new row

        Raises:
            NoUserSelectedError: the pointer names no existing user
            EmptyNameError, CountryNotFoundError: see find_country
            CountryAlreadyVisitedError: the (user, country) pair already exists
        """
        if not user_id or db.session.get(User, user_id) is None:
            raise NoUserSelectedError(f"User {user_id!r} does not exist")

        country = VisitService.find_country(country_name)
        country_code = VisitService.resolve_code(country.country_code)

        if VisitService.has_visited(user_id, country_code):
            raise CountryAlreadyVisitedError(user_id, country_code)

        visit = VisitedCountry(user_id=user_id, country_code=country_code)
        db.session.add(visit)
        try:
            db.session.commit()
        except IntegrityError:
            # Another request inserted the same pair after our check
            db.session.rollback()
            raise CountryAlreadyVisitedError(user_id, country_code)

        logger.info(f"User {user_id} visited {country_code} ({country.country_name})")
        return visit
