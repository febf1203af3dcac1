"""Security headers middleware.

Adds security headers to all HTTP responses using pure ASGI pattern.
"""

from uuid import uuid4

from ..config import settings


class SecurityHeadersMiddleware:
    """
    Add security headers to all responses.

    Headers added:
        - X-Request-Id: Unique request identifier for tracing (an incoming
          X-Request-Id is echoed back instead)
        - X-Content-Type-Options: nosniff
        - X-Frame-Options: DENY
        - X-XSS-Protection: 1; mode=block
        - Strict-Transport-Security: (production only)
    """

    def __init__(self, app, hsts: bool | None = None):
        self.app = app
        self.hsts = (not settings.debug) if hsts is None else hsts

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        incoming = dict(scope.get("headers", [])).get(b"x-request-id")
        request_id = incoming or str(uuid4()).encode()

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((b"x-request-id", request_id))
                headers.append((b"x-content-type-options", b"nosniff"))
                headers.append((b"x-frame-options", b"DENY"))
                headers.append((b"x-xss-protection", b"1; mode=block"))

                if self.hsts:
                    headers.append(
                        (b"strict-transport-security", b"max-age=31536000; includeSubDomains")
                    )

                message = {**message, "headers": headers}
            await send(message)

        await self.app(scope, receive, send_with_headers)
