# travel_tracker/main/forms.py
from flask_wtf import FlaskForm
from wtforms import StringField, HiddenField, SubmitField
from wtforms.validators import DataRequired, Length, Optional
from travel_tracker.constants import TrackerConstants, ErrorMessages


def strip_whitespace(value):
    if isinstance(value, str):
        return value.strip()
    return value


# --- Forms ---
class AddCountryForm(FlaskForm):
    country = StringField('Country', filters=[strip_whitespace], validators=[
        DataRequired(message=ErrorMessages.COUNTRY_EMPTY),
        Length(max=TrackerConstants.COUNTRY_NAME_MAX_LENGTH, message=ErrorMessages.COUNTRY_NOT_FOUND),
    ])
    submit = SubmitField('Add')


class SelectUserForm(FlaskForm):
    """Tab strip on the home page: one button per user plus "Add Family Member"."""
    # Both fields are filled by the submit buttons themselves (name/value pairs)
    user = HiddenField('User')
    add = HiddenField('Add')

    def wants_new_user(self):
        return self.add.data == TrackerConstants.NEW_USER_SENTINEL


class NewUserForm(FlaskForm):
    name = StringField('Name', filters=[strip_whitespace], validators=[
        DataRequired(message=ErrorMessages.NAME_EMPTY),
        Length(max=TrackerConstants.USER_NAME_MAX_LENGTH, message=ErrorMessages.ADD_USER_FAILED),
    ])
    color = StringField('Colour', filters=[strip_whitespace], validators=[
        Optional(),
        Length(max=TrackerConstants.USER_COLOR_MAX_LENGTH, message=ErrorMessages.ADD_USER_FAILED),
    ])
    submit = SubmitField('Add')


class DeleteUserForm(FlaskForm):
    submit = SubmitField('Delete Current Member')


def first_error(form, default=None):
    """Return the first validation message of `form` in field order."""
    for field in form:
        if field.errors:
            return field.errors[0]
    return default
