"""
Gunicorn configuration for the recruitment API

Run with: gunicorn app.main:app -c gunicorn.conf.py
"""
import os

# Server socket
bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")
backlog = 2048

# Worker processes
# Each worker owns its own database pool (DATABASE_POOL_SIZE + DATABASE_MAX_OVERFLOW)
workers = int(os.getenv("GUNICORN_WORKERS", 2))
worker_class = "uvicorn.workers.UvicornWorker"

# Worker lifecycle
max_requests = 1000
max_requests_jitter = 100

# Timeouts
timeout = 30
keepalive = 5
graceful_timeout = 30

# Process naming
proc_name = "hr_recruitment_api"

# Logging
# Application logs go through structlog; these cover gunicorn itself
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'


# Server hooks
def on_starting(server):
    server.log.info("Starting recruitment API")


def when_ready(server):
    server.log.info(f"Recruitment API ready with {workers} workers")


def worker_abort(worker):
    worker.log.info("Worker received SIGABRT signal")
