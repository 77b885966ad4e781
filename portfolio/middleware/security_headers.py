"""Security headers middleware.

Adds response headers suited to a JSON API consumed cross-origin by the
portfolio site. The interactive docs pages load scripts and styles from a
CDN, so they get no Content-Security-Policy. Raw ASGI.
"""

from typing import Callable

API_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}

DOCS_PATHS = ("/docs", "/redoc", "/openapi.json")


def _encode(headers: dict[str, str]) -> list[tuple[bytes, bytes]]:
    return [(k.lower().encode(), v.encode()) for k, v in headers.items()]


def SecurityHeadersMiddleware(
    app: Callable, headers: dict[str, str] | None = None
) -> Callable:
    """Set security headers on responses that do not already carry them. Raw ASGI."""
    resolved = headers if headers is not None else API_HEADERS
    api_headers = _encode(resolved)
    docs_headers = _encode(
        {k: v for k, v in resolved.items() if k != "Content-Security-Policy"}
    )

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        extra = docs_headers if scope.get("path", "").startswith(DOCS_PATHS) else api_headers

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                present = {h[0].lower() for h in headers}
                headers.extend(h for h in extra if h[0] not in present)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
