import os

bind = os.environ.get("GUNICORN_BIND", "0.0.0.0:8000")
# One worker, one thread: tracker intents are applied strictly one at a time.
workers = 1
threads = 1
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "30"))
worker_class = "sync"
wsgi_app = "habitcal.wsgi:app"
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("GUNICORN_LOGLEVEL", "info")
