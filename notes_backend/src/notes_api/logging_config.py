import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure root logging once. Leaves existing handlers alone so a host
    process (uvicorn, pytest) that already set up logging keeps its own.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stdout)
    logging.getLogger("notes_api").setLevel(level.upper())
