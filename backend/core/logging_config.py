import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the API process and scripts."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # uvicorn installs its own handlers; keep SQLAlchemy quiet unless echo is on
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
