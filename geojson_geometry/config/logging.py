"""Logging format used by applications embedding the library."""

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
