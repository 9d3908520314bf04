# travel_tracker/models/location.py

from . import db # Use relative import
from travel_tracker.constants import TrackerConstants


class Country(db.Model):
    """Reference list of countries. Loaded by `flask seed-countries`, never written by requests."""
    __tablename__ = 'countries'

    id = db.Column(db.Integer, primary_key=True)
    country_code = db.Column(db.String(TrackerConstants.COUNTRY_CODE_LENGTH), nullable=False, index=True)
    country_name = db.Column(db.String(TrackerConstants.COUNTRY_NAME_MAX_LENGTH), nullable=False)

    def __repr__(self):
        return f'<Country {self.country_code} {self.country_name}>'


class VisitedCountry(db.Model):
    """Links a user to a country code they have visited."""
    __tablename__ = 'visited_countries'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'country_code', name='uq_visited_countries_user_country'),
    )

    id = db.Column(db.Integer, primary_key=True)
    country_code = db.Column(db.String(TrackerConstants.COUNTRY_CODE_LENGTH), nullable=False)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey('users.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )

    user = db.relationship('User', back_populates='visits')

    def __repr__(self):
        return f'<VisitedCountry user={self.user_id} {self.country_code}>'
