"""
Client identity for rate limiting.

Behind a trusted reverse proxy the original address is in X-Forwarded-For
(first hop) or X-Real-IP; otherwise the socket peer address is used.
"""

from fastapi import Request
from slowapi.util import get_remote_address

from org_api.config.settings import Config


def get_client_identity(request: Request) -> str:
    if Config.TRUST_PROXY_HEADERS:
        forwarded = request.headers.get("x-forwarded-for", "")
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
        real_ip = request.headers.get("x-real-ip", "").strip()
        if real_ip:
            return real_ip
    return get_remote_address(request)
