"""Map article URLs to a stable link key used as the storage identity."""

from __future__ import annotations

import logging
import math
import re
from typing import Any
from urllib.parse import parse_qsl, urlsplit

from common.datetime import parse_datetime, to_ms, yyyymmdd

logger = logging.getLogger(__name__)

CANONICAL_SCHEME = "https"

TRACKING_PARAMS = (
    re.compile(r"^utm_", re.IGNORECASE),
    re.compile(r"^fbclid$", re.IGNORECASE),
    re.compile(r"^gclid$", re.IGNORECASE),
    re.compile(r"^dclid$", re.IGNORECASE),
    re.compile(r"^msclkid$", re.IGNORECASE),
    re.compile(r"^igshid$", re.IGNORECASE),
    re.compile(r"^ref$", re.IGNORECASE),
    re.compile(r"^ref_src$", re.IGNORECASE),
    re.compile(r"^src$", re.IGNORECASE),
    re.compile(r"^from$", re.IGNORECASE),
    re.compile(r"^si_src$", re.IGNORECASE),
    re.compile(r"^mc_cid$", re.IGNORECASE),
    re.compile(r"^mc_eid$", re.IGNORECASE),
)

# Outlets publishing the same article under several hosts
CANONICAL_HOSTS = {
    "rtvslo.si": "rtvslo.si",
    "cnn.com": "cnn.com",
}

_NUMERIC_ID = re.compile(r"\d{6,}")
_AMP_SUFFIX = re.compile(r"/amp/?$", re.IGNORECASE)
_EXTENSION = re.compile(r"\.[a-z0-9]+$", re.IGNORECASE)


def _canonical_host(host: str) -> str:
    host = host.lower()
    if host.startswith("www."):
        host = host[4:]
    for domain, canonical in CANONICAL_HOSTS.items():
        if host == domain or host.endswith("." + domain):
            return canonical
    return host


def _is_tracking_param(name: str) -> bool:
    return any(pattern.search(name) for pattern in TRACKING_PARAMS)


def _clean_path(path: str) -> str:
    path = _AMP_SUFFIX.sub("/", path)
    if len(path) > 1:
        path = path.rstrip("/")
    return path


def _numeric_id(path: str, params: list[tuple[str, str]]) -> str | None:
    candidates = _NUMERIC_ID.findall(path)
    for _, value in params:
        candidates.extend(_NUMERIC_ID.findall(value))
    if not candidates:
        return None
    return max(candidates, key=len)


def _publish_day(published: Any) -> str | None:
    if published is None or isinstance(published, bool):
        return None
    if isinstance(published, (int, float)):
        if isinstance(published, float) and not math.isfinite(published):
            return None
        if published <= 0:
            return None
        return yyyymmdd(int(published))
    dt = parse_datetime(published)
    if dt is None:
        return None
    try:
        return yyyymmdd(to_ms(dt))
    except (OverflowError, OSError, ValueError):
        return None


def make_link_key(raw: str, published: Any = None) -> str:
    """Build the link key for an article URL.

    Article URLs carrying a numeric ID (six or more digits) key on the longest
    such ID. Otherwise the key is the last path segment, prefixed with the UTC
    publish day when one is known so generic slugs on different days stay
    distinct. Unparseable input is returned trimmed and unchanged.

    Args:
        raw: Article URL as found in the feed.
        published: Optional publish date (ISO/RFC-822 string, datetime or epoch ms).

    Returns:
        The link key, e.g. ``https://example.com/a/1234567``.
    """
    if not isinstance(raw, str):
        return ""
    trimmed = raw.strip()

    try:
        parts = urlsplit(trimmed)
        hostname = parts.hostname
        port = parts.port
    except ValueError:
        logger.debug("Unparseable URL, using raw link as key: %s", trimmed)
        return trimmed

    if not parts.scheme or not hostname:
        logger.debug("URL without scheme or host, using raw link as key: %s", trimmed)
        return trimmed

    host = _canonical_host(hostname)
    if port is not None and port not in (80, 443):
        host = f"{host}:{port}"

    params = [
        (name, value)
        for name, value in parse_qsl(parts.query, keep_blank_values=True)
        if not _is_tracking_param(name)
    ]
    path = _clean_path(parts.path)
    base = f"{CANONICAL_SCHEME}://{host}"

    article_id = _numeric_id(path, params)
    if article_id:
        return f"{base}/a/{article_id}"

    segments = [segment for segment in path.split("/") if segment]
    if segments:
        slug = _EXTENSION.sub("", segments[-1]).lower()
        if slug:
            day = _publish_day(published)
            if day:
                return f"{base}/a/{day}-{slug}"
            return f"{base}/a/{slug}"

    return f"{base}{path or '/'}"
