# Este es el punto de entrada del proceso: lee host y puerto, configura logging,
# arranca el servidor de eco y lo detiene al recibir SIGINT o SIGTERM.

"""
HTTP echo server entry point.

Usage:
    http-echo [host] [port]
    python -m http_echo [host] [port]
"""
import argparse  # Argumentos posicionales host y puerto
import asyncio  # Bucle de eventos
import signal  # Señales de terminación
import sys  # Salida estándar para mensajes de error
import traceback  # Traza de errores de arranque
from typing import List, Optional

from .config.settings import get_settings  # Singleton de configuración
from .echo_server import EchoServer  # Ciclo de vida del servidor
from .utils.logging import setup_logging, get_logger  # Sistema de logging estructurado
from .utils.validation import parse_port  # Validación de puerto

logger = get_logger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="http-echo",
        description="HTTP server that echoes each request back as JSON.",
    )
    parser.add_argument("host", nargs="?", default=settings.host, help="address to bind")
    parser.add_argument("port", nargs="?", default=str(settings.port), help="port to bind")
    return parser.parse_args(argv)


async def serve(server: EchoServer) -> None:
    """
    Run ``server`` until SIGINT or SIGTERM, then stop it.

    Args:
        server: Server to run; started here, always stopped on return
    """
    loop = asyncio.get_running_loop()
    shutdown = asyncio.Event()

    def _on_signal(signame: str) -> None:
        print("\nShutting down...", flush=True)
        logger.debug("shutdown_signal_received", signal=signame)
        shutdown.set()

    installed = []
    for sig in SHUTDOWN_SIGNALS:
        try:
            loop.add_signal_handler(sig, _on_signal, sig.name)
            installed.append(sig)
        except (NotImplementedError, RuntimeError):
            # Windows loops and non-main threads; KeyboardInterrupt still applies
            logger.debug("signal_handler_unavailable", signal=sig.name)

    try:
        await server.start()
        print("Press Ctrl+C to stop the server", flush=True)
        await shutdown.wait()
    finally:
        await server.stop()
        for sig in installed:
            loop.remove_signal_handler(sig)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for running the echo server.

    Returns:
        Process exit code: 0 after a signal-triggered shutdown, 1 on startup error
    """
    try:
        args = parse_args(argv)
        settings = get_settings()
        settings.ensure_directories()

        setup_logging(
            level=settings.log_level,
            json_logs=settings.log_json,
            log_dir=settings.log_dir
        )

        server = EchoServer(args.host, parse_port(args.port), settings=settings)
        asyncio.run(serve(server))
    except KeyboardInterrupt:
        logger.info("echo_server_shutdown", reason="keyboard_interrupt")
    except Exception as e:
        print(f"Error: {e}", flush=True)
        traceback.print_exc(file=sys.stdout)
        sys.stdout.flush()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
