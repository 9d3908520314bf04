# travel_tracker/cli.py
"""
Flask CLI commands for setting up and inspecting the tracker database.
"""

import csv
import os
import click
from travel_tracker.extensions import db
from travel_tracker.models import Country, User, VisitedCountry

DEFAULT_COUNTRIES_CSV = os.path.join(os.path.dirname(__file__), 'data', 'countries.csv')


def read_countries_csv(path):
    """
    Read (country_code, country_name) pairs from a CSV with a header row.

    Rows missing either column are skipped; codes are upper-cased.
    """
    with open(path, newline='', encoding='utf-8') as handle:
        for row in csv.DictReader(handle):
            code = (row.get('country_code') or '').strip().upper()
            name = (row.get('country_name') or '').strip()
            if code and name:
                yield code, name


def seed_countries(path=DEFAULT_COUNTRIES_CSV):
    """
    Insert countries from `path` that are not stored yet.

    Returns:
        tuple: (added, skipped)
    """
    existing = set(db.session.scalars(db.select(Country.country_code)))
    added = 0
    skipped = 0
    for code, name in read_countries_csv(path):
        if code in existing:
            skipped += 1
            continue
        db.session.add(Country(country_code=code, country_name=name))
        existing.add(code)
        added += 1
    db.session.commit()
    return added, skipped


def register_cli_commands(app):
    """Register CLI commands with the Flask app."""

    @app.cli.command('init-db')
    def init_db_command():
        """Create the users, countries and visited_countries tables."""
        db.create_all()
        click.echo("Created tables: users, countries, visited_countries")

    @app.cli.command('seed-countries')
    @click.argument('csv_path', required=False, type=click.Path(exists=True, dir_okay=False))
    def seed_countries_command(csv_path):
        """Load the country list (bundled CSV unless CSV_PATH is given)."""
        added, skipped = seed_countries(csv_path or DEFAULT_COUNTRIES_CSV)
        click.echo(f"Countries added: {added}, already present: {skipped}")

    @app.cli.command('list-users')
    def list_users_command():
        """Show every user with their colour and number of visited countries."""
        users = db.session.scalars(db.select(User).order_by(User.id)).all()
        if not users:
            click.echo("No users yet.")
            return

        for user in users:
            visited = db.session.scalar(
                db.select(db.func.count(VisitedCountry.id)).where(VisitedCountry.user_id == user.id)
            )
            click.echo(f"{user.id:>4}  {user.name:<15}  {user.color or '-':<9}  {visited} countries")
