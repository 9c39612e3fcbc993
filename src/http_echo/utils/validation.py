"""
Input validation for listener addresses.
"""
from ..exceptions import ValidationError  # Excepción personalizada para errores de validación


def validate_port(port: int, min_port: int = 0, max_port: int = 65535) -> int:
    """
    Validate port number.

    Args:
        port: Port number to validate
        min_port: Minimum allowed port (default: 0, meaning an ephemeral port)
        max_port: Maximum allowed port (default: 65535)

    Returns:
        Validated port number

    Raises:
        ValidationError: If port is not an integer or is out of range
    """
    if not isinstance(port, int) or isinstance(port, bool):
        raise ValidationError(
            "Port must be an integer",
            context={"port": port, "type": type(port).__name__}
        )

    if not (min_port <= port <= max_port):
        raise ValidationError(
            f"Port must be between {min_port} and {max_port}",
            context={"port": port, "min": min_port, "max": max_port}
        )

    return port


def parse_port(value: str) -> int:
    """
    Parse a command-line port argument.

    Raises:
        ValidationError: If the value is not an integer in range
    """
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ValidationError(
            f"Invalid port: {value!r}",
            context={"port": value}
        ) from None
    return validate_port(port)
