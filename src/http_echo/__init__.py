# Este archivo marca el paquete http_echo y expone la versión del proyecto.

"""
HTTP Echo Server - answers every request with a JSON mirror of it.
"""

__version__ = "0.1.0"
__description__ = "Minimal HTTP server that echoes requests back as JSON"

# Expose main components for easier imports
from .echo_server import EchoServer
from .exceptions import AlreadyRunningError, BindFailedError
from .server import main

__all__ = ["EchoServer", "AlreadyRunningError", "BindFailedError", "main", "__version__"]
