from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_wtf.csrf import CSRFProtect

db = SQLAlchemy()
migrate = Migrate()

# Limits and storage come from the RATELIMIT_* config keys
limiter = Limiter(key_func=get_remote_address)

csrf = CSRFProtect()
