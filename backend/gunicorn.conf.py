# Run with: gunicorn -c gunicorn.conf.py "streamauth:create_app()"
import os

# Bind & workers
bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")
# Revocations live in process memory unless REDIS_URL is set; a logout on one
# worker is only seen by the others through Redis.
workers = int(os.getenv("GUNICORN_WORKERS", "1" if not os.getenv("REDIS_URL") else "2"))
threads = int(os.getenv("GUNICORN_THREADS", "4"))
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr (collected by Docker)
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

# Trust proxy headers (ProxyFix handles the app side)
forwarded_allow_ips = os.getenv("FORWARDED_ALLOW_IPS", "127.0.0.1")
proxy_protocol = False
