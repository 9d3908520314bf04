# Gunicorn configuration file for the travel tracker
# https://docs.gunicorn.org/en/stable/settings.html

import multiprocessing
import os

# Server socket
bind = f"0.0.0.0:{os.environ.get('PORT', '4000')}"
backlog = 2048

# Worker processes
workers = multiprocessing.cpu_count() * 2 + 1  # Recommended formula
worker_class = "sync"
timeout = 60
keepalive = 5
max_requests = 1000  # Restart workers after this many requests (prevents memory leaks)
max_requests_jitter = 50  # Add randomness to prevent all workers restarting at once

# Server mechanics
daemon = False
tmp_upload_dir = None

# Logging (stdout/stderr, collected by the process manager)
errorlog = "-"
accesslog = "-"
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process naming
proc_name = "travel-tracker"

# Security
limit_request_line = 4094
limit_request_fields = 100
limit_request_field_size = 8190
