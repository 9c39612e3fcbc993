# Este archivo construye la respuesta de eco: copia método, URI, headers y body
# de la petición a un documento JSON y registra una línea por petición.

"""
Echo responder.

Maps an InboundRequest to an OutboundResponse whose body is a pretty-printed
JSON mirror of the request. Holds no state; safe to call concurrently.
"""
import json  # Serialización del payload de eco

from .models.echo import EchoPayload, InboundRequest, OutboundResponse  # Modelos Pydantic
from .utils.logging import get_logger  # Logger estructurado

logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"
JSON_INDENT = 4


def decode_body(body: bytes) -> str:
    """
    Interpret raw body bytes as text.

    Valid UTF-8 is returned unchanged; invalid sequences become U+FFFD.
    """
    return body.decode("utf-8", errors="replace")


def build_payload(request: InboundRequest) -> EchoPayload:
    """Copy the request verbatim into an EchoPayload."""
    return EchoPayload(
        method=request.method,
        uri=request.uri,
        headers=request.header_map(),
        body=decode_body(request.body),
    )


def render_payload(payload: EchoPayload) -> bytes:
    """Serialize a payload as indented JSON (json never escapes '/')."""
    return json.dumps(payload.model_dump(), indent=JSON_INDENT).encode("utf-8")


def _log_request(request: InboundRequest) -> None:
    try:
        logger.info(
            f"{request.method} {request.uri} - Body: {request.body_size} bytes",
            method=request.method,
            uri=request.uri,
            body_bytes=request.body_size,
        )
    except Exception:  # noqa: BLE001 - request logging is best effort
        pass


def handle(request: InboundRequest) -> OutboundResponse:
    """
    Echo a request back as JSON.

    Args:
        request: Request delivered by the listener

    Returns:
        Status 200 response with content-type application/json and the
        serialized EchoPayload as body
    """
    response = OutboundResponse(
        status_code=200,
        headers={"content-type": JSON_CONTENT_TYPE},
        body=render_payload(build_payload(request)),
    )
    _log_request(request)
    return response
