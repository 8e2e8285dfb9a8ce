"""HTTP services for Venue Calendar."""

from .responses import MEDIA_TYPE
from .server import create_app, run_local_server

__all__ = ["MEDIA_TYPE", "create_app", "run_local_server"]
