# travel_tracker/models/user.py

from . import db # Use relative import
from travel_tracker.constants import TrackerConstants


class User(db.Model):
    """A family member whose visited countries are tracked."""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(TrackerConstants.USER_NAME_MAX_LENGTH), unique=True, nullable=False)
    # CSS colour used to tint this member's countries; None falls back to the default
    color = db.Column(db.String(TrackerConstants.USER_COLOR_MAX_LENGTH), nullable=True)

    # --- Relationships ---
    visits = db.relationship(
        'VisitedCountry',
        back_populates='user',
        lazy='dynamic',
        passive_deletes=True,
    )

    @property
    def display_color(self):
        return self.color or TrackerConstants.DEFAULT_COLOR

    def __repr__(self):
        return f'<User {self.id} {self.name}>'
