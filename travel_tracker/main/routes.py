# travel_tracker/main/routes.py
# Home page and the four form handlers. Every handler ends in either a
# redirect to the home page (success) or a re-render of it with an error.

from flask import render_template, redirect, request, url_for, current_app
from flask_wtf.csrf import CSRFError
from travel_tracker.main import bp
from travel_tracker.main.forms import AddCountryForm, SelectUserForm, NewUserForm, DeleteUserForm, first_error
from travel_tracker.extensions import db, limiter
from travel_tracker.constants import TrackerConstants, ErrorMessages
from travel_tracker.exceptions import CountryAlreadyVisitedError, CountryNotFoundError, NoUserSelectedError
from travel_tracker.logging_config import log_activity
from travel_tracker.selection import get_current_user_id, set_current_user_id
from travel_tracker.services import UserService, VisitService


def write_limit():
    return current_app.config.get("RATELIMIT_WRITE", "30 per minute")


def load_home_state(user_id):
    """Collect everything the home page shows for `user_id`."""
    countries = VisitService.visited_codes(user_id)
    current_user = UserService.get_user(user_id)
    return dict(
        countries=countries,
        total=len(countries),
        users=UserService.list_users(),
        current_user=current_user,
        color=current_user.display_color if current_user else TrackerConstants.DEFAULT_COLOR,
    )


def render_home(error=None):
    """Render the home page, falling back to an empty page if the database is unreachable."""
    user_id = get_current_user_id()
    try:
        state = load_home_state(user_id)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error fetching home page data for user {user_id}: {e}", exc_info=True)
        state = dict(
            countries=[],
            total=0,
            users=[],
            current_user=None,
            color=TrackerConstants.DEFAULT_COLOR,
        )
        error = error or ErrorMessages.FETCH_FAILED

    return render_template(
        'index.html',
        error=error,
        add_form=AddCountryForm(formdata=None),
        select_form=SelectUserForm(formdata=None),
        delete_form=DeleteUserForm(formdata=None),
        **state
    )


@bp.route('/')
@limiter.exempt
def index():
    return render_home()


@bp.errorhandler(429)
def too_many_changes(e):
    current_app.logger.warning(f"Rate limit hit on {request.path}: {e.description}")
    return render_home(ErrorMessages.TOO_MANY_CHANGES), 429


@bp.errorhandler(CSRFError)
def form_expired(e):
    current_app.logger.warning(f"CSRF check failed on {request.path}: {e.description}")
    return render_home(ErrorMessages.FORM_EXPIRED), 400


@bp.route('/add', methods=['POST'])
@limiter.limit(write_limit)
def add_country():
    form = AddCountryForm()
    if not form.validate_on_submit():
        return render_home(first_error(form, ErrorMessages.COUNTRY_EMPTY))

    user_id = get_current_user_id()
    try:
        visit = VisitService.add_visit(user_id, form.country.data)
    except CountryAlreadyVisitedError:
        return render_home(ErrorMessages.COUNTRY_ALREADY_ADDED)
    except NoUserSelectedError:
        return render_home(ErrorMessages.NO_USER_SELECTED)
    except CountryNotFoundError:
        return render_home(ErrorMessages.COUNTRY_NOT_FOUND)
    except Exception as e:
        # Unexpected failures read the same as an unknown country
        db.session.rollback()
        current_app.logger.error(f"Error adding country '{form.country.data}' for user {user_id}: {e}", exc_info=True)
        return render_home(ErrorMessages.COUNTRY_NOT_FOUND)

    log_activity(user_id, 'ADD_COUNTRY', code=visit.country_code)
    return redirect(url_for('main.index'))


@bp.route('/user', methods=['POST'])
def select_user():
    form = SelectUserForm()
    if form.wants_new_user():
        return render_template('new.html', form=NewUserForm(formdata=None))

    user_id = set_current_user_id(form.user.data)
    log_activity(user_id, 'SWITCH_USER')
    return redirect(url_for('main.index'))


@bp.route('/new', methods=['POST'])
@limiter.limit(write_limit)
def new_user():
    form = NewUserForm()
    if not form.validate_on_submit():
        return render_home(first_error(form, ErrorMessages.NAME_EMPTY))

    try:
        user = UserService.create_user(form.name.data, form.color.data)
    except Exception as e:
        current_app.logger.error(f"Error adding new member '{form.name.data}': {e}", exc_info=True)
        return render_home(ErrorMessages.ADD_USER_FAILED)

    set_current_user_id(user.id)
    log_activity(user.id, 'NEW_USER', name=user.name, color=user.color)
    return redirect(url_for('main.index'))


@bp.route('/delete', methods=['POST'])
@limiter.limit(write_limit)
def delete_user():
    user_id = get_current_user_id()
    if not user_id:
        return render_home(ErrorMessages.NO_USER_SELECTED)

    try:
        UserService.delete_user(user_id)
    except Exception as e:
        current_app.logger.error(f"Error deleting user {user_id}: {e}", exc_info=True)
        return render_home(ErrorMessages.DELETE_USER_FAILED)

    # The selection is left pointing at the deleted id until another user is chosen
    log_activity(user_id, 'DELETE_USER')
    return redirect(url_for('main.index'))
