"""Headers which are known to have safe values for logging.

Grouped the way the MDN header reference groups them.
See https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers
"""

AUTHENTICATION_HEADERS: tuple[str, ...] = ("WWW-Authenticate", "Proxy-Authenticate")

CACHING_HEADERS: tuple[str, ...] = (
    "Age",
    "Cache-Control",
    "Clear-Site-Data",
    "Expires",
    "Pragma",
    "Warning",
)

CLIENT_HINTS_HEADERS: tuple[str, ...] = (
    "Accept-CH",
    "Accept-CH-Lifetime",
    "Early-Data",
    "Device-Memory",
    "Save-Data",
    "Viewport-Width",
    "Width",
)

CONDITIONALS_HEADERS: tuple[str, ...] = (
    "Last-Modified",
    "ETag",
    "If-Match",
    "If-None-Match",
    "If-Modified-Since",
    "If-Unmodified-Since",
    "Vary",
)

CONNECTION_MANAGEMENT_HEADERS: tuple[str, ...] = ("Connection", "Keep-Alive")

CONTENT_NEGOTIATION_HEADERS: tuple[str, ...] = (
    "Accept",
    "Accept-Charset",
    "Accept-Encoding",
    "Accept-Language",
)

CONTROLS_HEADERS: tuple[str, ...] = ("Expect", "Max-Forwards")

CORS_HEADERS: tuple[str, ...] = (
    "Access-Control-Allow-Origin",
    "Access-Control-Allow-Credentials",
    "Access-Control-Allow-Headers",
    "Access-Control-Allow-Methods",
    "Access-Control-Expose-Headers",
    "Access-Control-Max-Age",
    "Access-Control-Request-Headers",
    "Access-Control-Request-Method",
    "Origin",
    "Timing-Allow-Origin",
)

DO_NOT_TRACK_HEADERS: tuple[str, ...] = ("DNT", "Tk")

DOWNLOAD_HEADERS: tuple[str, ...] = ("Content-Disposition",)

MESSAGE_BODY_INFORMATION_HEADERS: tuple[str, ...] = (
    "Content-Length",
    "Content-Type",
    "Content-Encoding",
    "Content-Language",
    "Content-Location",
)

PROXIES_HEADERS: tuple[str, ...] = (
    "Forwarded",
    "X-Forwarded-For",
    "X-Forwarded-Host",
    "X-Forwarded-Proto",
    "Via",
)

REDIRECTS_HEADERS: tuple[str, ...] = ("Location",)

REQUEST_CONTEXT_HEADERS: tuple[str, ...] = (
    "From",
    "Host",
    "Referer",
    "Referrer-Policy",
    "User-Agent",
)

RESPONSE_CONTEXT_HEADERS: tuple[str, ...] = ("Allow", "Server")

RANGE_REQUESTS_HEADERS: tuple[str, ...] = (
    "Accept-Ranges",
    "Range",
    "If-Range",
    "Content-Range",
)

SECURITY_HEADERS: tuple[str, ...] = (
    "Cross-Origin-Embedder-Policy",
    "Cross-Origin-Opener-Policy",
    "Cross-Origin-Resource-Policy",
    "Content-Security-Policy",
    "Content-Security-Policy-Report-Only",
    "Expect-CT",
    "Feature-Policy",
    "Strict-Transport-Security",
    "X-Content-Type-Options",
    "X-Download-Options",
    "X-Frame-Options",
    "X-Permitted-Cross-Domain-Policies",
    "X-Powered-By",
    "X-XSS-Protection",
)

HPKP_HEADERS: tuple[str, ...] = ("Public-Key-Pins", "Public-Key-Pins-Report-Only")

FETCH_METADATA_REQUEST_HEADERS: tuple[str, ...] = (
    "Sec-Fetch-Site",
    "Sec-Fetch-Mode",
    "Sec-Fetch-User",
    "Sec-Fetch-Dest",
)

TRANSFER_CODING_HEADERS: tuple[str, ...] = ("Transfer-Encoding", "TE", "Trailer")

OTHER_HEADERS: tuple[str, ...] = (
    "Alt-Svc",
    "Date",
    "Large-Allocation",
    "Link",
    "Retry-After",
    "Server-Timing",
    "SourceMap",
    "X-SourceMap",
    "Upgrade",
    "X-DNS-Prefetch-Control",
)

HEADER_GROUPS: dict[str, tuple[str, ...]] = {
    "authentication": AUTHENTICATION_HEADERS,
    "caching": CACHING_HEADERS,
    "client_hints": CLIENT_HINTS_HEADERS,
    "conditionals": CONDITIONALS_HEADERS,
    "connection_management": CONNECTION_MANAGEMENT_HEADERS,
    "content_negotiation": CONTENT_NEGOTIATION_HEADERS,
    "controls": CONTROLS_HEADERS,
    "cors": CORS_HEADERS,
    "do_not_track": DO_NOT_TRACK_HEADERS,
    "download": DOWNLOAD_HEADERS,
    "message_body_information": MESSAGE_BODY_INFORMATION_HEADERS,
    "proxies": PROXIES_HEADERS,
    "redirects": REDIRECTS_HEADERS,
    "request_context": REQUEST_CONTEXT_HEADERS,
    "response_context": RESPONSE_CONTEXT_HEADERS,
    "range_requests": RANGE_REQUESTS_HEADERS,
    "security": SECURITY_HEADERS,
    "hpkp": HPKP_HEADERS,
    "fetch_metadata_request": FETCH_METADATA_REQUEST_HEADERS,
    "transfer_coding": TRANSFER_CODING_HEADERS,
    "other": OTHER_HEADERS,
}

# Lower-cased union of every group, used by the default redaction policy
DEFAULT_ALLOWED_HEADERS = frozenset(
    name.lower() for group in HEADER_GROUPS.values() for name in group
)


def is_default_allowed_header(header_name: str) -> bool:
    """Check if a header value is safe to log under the default policy.

    Args:
        header_name: The header name to check (any casing).

    Returns:
        True if the header is in the default allow-list.
    """
    return header_name.lower() in DEFAULT_ALLOWED_HEADERS
