from datetime import datetime
from travel_tracker.constants import TrackerConstants


def utility_processor():
    return dict(
        current_year=datetime.utcnow().year,
        default_color=TrackerConstants.DEFAULT_COLOR,
        user_colors=TrackerConstants.USER_COLORS,
    )
