"""
Gunicorn Configuration

Uvicorn worker under Gunicorn. Sessions and the dataset live in process
memory, so exactly one worker is started.
"""

import os

# Server socket
bind = os.getenv("BIND", "0.0.0.0:8000")
backlog = 2048

# Worker processes
workers = 1
worker_class = "uvicorn.workers.UvicornWorker"
worker_connections = 1000
timeout = 60
keepalive = 5
graceful_timeout = 30

# Process naming
proc_name = "fulfillo-ops-hub"

# Server mechanics
daemon = False
pidfile = None

# Logging
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
accesslog = None


def when_ready(server):
    """Called when server is ready to receive connections."""
    server.log.info("Fulfillo Operations Hub ready on %s", bind)
