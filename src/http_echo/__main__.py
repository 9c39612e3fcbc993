# Este archivo permite ejecutar el servidor de eco como módulo Python usando: python -m http_echo

"""
Entry point for running the HTTP echo server as a Python module.

Usage:
    python -m http_echo [host] [port]
"""
import sys

from .server import main

if __name__ == "__main__":
    sys.exit(main())
