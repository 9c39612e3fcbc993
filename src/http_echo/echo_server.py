# Este archivo implementa el ciclo de vida del servidor de eco: arranque con
# protección contra doble inicio, parada idempotente y accesores de host/puerto.

"""
Echo server lifecycle.

Wraps an aiohttp AppRunner/TCPSite pair with explicit Stopped/Running state.
"""
import asyncio  # Lock para serializar start/stop
from typing import List, Optional  # Type hints para valores opcionales y listas

from aiohttp import web  # Runner y site del listener HTTP

from .config.settings import Settings, get_settings  # Configuración
from .exceptions import AlreadyRunningError, BindFailedError  # Excepciones de ciclo de vida
from .listener import create_app  # Aplicación aiohttp con ruta catch-all
from .models.echo import ServerState  # Enum de estado
from .responder import handle  # Responder de eco
from .utils.logging import get_logger  # Logger estructurado
from .utils.validation import validate_port  # Validación de puerto

logger = get_logger(__name__)


class EchoServer:
    """HTTP server that answers every request with a JSON mirror of it."""

    def __init__(self, host: str = "127.0.0.1", port: int = 8080, settings: Optional[Settings] = None):
        """
        Initialize an echo server in the stopped state.

        Args:
            host: Address to bind
            port: Port to bind (0 picks an ephemeral port)
            settings: Settings for drain timeout and body limit (default: singleton)

        Raises:
            ValidationError: If port is not an integer in 0..65535
        """
        self._host = host
        self._port = validate_port(port)
        self._settings = settings or get_settings()
        self._runner: Optional[web.AppRunner] = None
        self._state = ServerState.STOPPED
        self._lock = asyncio.Lock()

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def state(self) -> ServerState:
        return self._state

    @property
    def addresses(self) -> List:
        """Socket addresses actually bound; empty while stopped."""
        if self._runner is None:
            return []
        return list(self._runner.addresses)

    def is_running(self) -> bool:
        return self._state is ServerState.RUNNING

    async def start(self) -> None:
        """
        Bind the listener and begin dispatching requests.

        Raises:
            AlreadyRunningError: If the server is already running
            BindFailedError: If host:port cannot be bound; state stays stopped
        """
        async with self._lock:
            if self._state is ServerState.RUNNING:
                raise AlreadyRunningError(
                    "Server is already running",
                    context={"host": self._host, "port": self._port}
                )

            app = create_app(handle, max_body_size=self._settings.max_body_size)
            runner = web.AppRunner(
                app,
                handle_signals=False,
                access_log=None,
                shutdown_timeout=self._settings.shutdown_timeout,
            )
            await runner.setup()

            site = web.TCPSite(runner, self._host, self._port)
            try:
                await site.start()
            except OSError as e:
                await runner.cleanup()
                logger.error("bind_failed", host=self._host, port=self._port, error=str(e))
                raise BindFailedError(
                    f"Failed to bind {self._host}:{self._port}: {e}",
                    context={"host": self._host, "port": self._port}
                ) from e
            except BaseException:
                # Cancellation or an unexpected error: release the runner too
                await runner.cleanup()
                raise

            self._runner = runner
            self._state = ServerState.RUNNING
            bound_port = runner.addresses[0][1] if runner.addresses else self._port

        logger.info(
            f"HTTP Echo server listening on http://{self._host}:{bound_port}",
            host=self._host,
            port=self._port,
            bound_port=bound_port,
        )

    async def stop(self) -> None:
        """
        Stop accepting connections and release the socket.

        In-flight requests get up to ``shutdown_timeout`` seconds to finish.
        No-op when already stopped.
        """
        async with self._lock:
            if self._state is ServerState.STOPPED:
                return

            runner, self._runner = self._runner, None
            try:
                await runner.cleanup()
            finally:
                self._state = ServerState.STOPPED

        logger.info("Server stopped", host=self._host, port=self._port)
