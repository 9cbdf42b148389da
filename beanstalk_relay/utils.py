import re
from datetime import datetime, timezone
from urllib.parse import urlparse

SNS_HOST_PATTERN = re.compile(r'^sns\.[a-z0-9-]+\.amazonaws\.com(\.cn)?$')


def _is_meaningful(value):
    if value is None:
        return False
    return str(value).strip() != ""


def get_key(data, name, default=None):
    """Lê uma chave aceitando tanto o formato AWS (``Records``) quanto minúsculo (``records``)."""
    if not isinstance(data, dict):
        return default
    if name in data:
        return data[name]
    lowered = name.lower()
    for key, value in data.items():
        if str(key).lower() == lowered:
            return value
    return default


def is_sns_subscribe_url(url):
    # só confirma contra o próprio SNS, nunca contra um host arbitrário
    if not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url)
        port = parsed.port
    except ValueError:
        return False
    if parsed.scheme != 'https' or port not in (None, 443):
        return False
    return bool(SNS_HOST_PATTERN.match(parsed.hostname or ''))


def format_timestamp(timestamp):
    if timestamp is None:
        return 'N/A'
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is not None:
            timestamp = timestamp.astimezone(timezone.utc).replace(tzinfo=None)
        return timestamp.isoformat() + 'Z'
    return str(timestamp)
