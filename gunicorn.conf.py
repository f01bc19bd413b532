"""
Gunicorn configuration for the JobBoardly API

Run with: gunicorn jobboardly.main:app -c gunicorn.conf.py
"""
import os

# Server socket
bind = "{}:{}".format(os.getenv("HOST", "0.0.0.0"), os.getenv("PORT", "8000"))
backlog = 2048

# Workers (each holds its own MongoDB pool)
workers = int(os.getenv("GUNICORN_WORKERS", 2))
worker_class = "uvicorn.workers.UvicornWorker"
max_requests = 1000
max_requests_jitter = 100

# Matching requests wait on the model provider
timeout = int(os.getenv("GUNICORN_TIMEOUT", 90))
graceful_timeout = 30
keepalive = 5

proc_name = "jobboardly_api"
daemon = False

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()


def when_ready(server):
    server.log.info("JobBoardly API ready, spawning %s workers", workers)
