"""
WSGI entry point.

    gunicorn -c gunicorn.conf.py wsgi:app    # production
    python wsgi.py                           # development server on PORT (4000)
"""

import os
from config import config
from travel_tracker import create_app

app = create_app(config[os.environ.get('FLASK_CONFIG', 'default')])


if __name__ == '__main__':
    app.run(port=app.config.get('PORT', 4000))
