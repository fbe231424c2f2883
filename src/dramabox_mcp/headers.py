"""Upstream request headers."""

from datetime import datetime

from .config import Config
from .consts import UPSTREAM_USER_AGENT
from .models import DramaboxToken


def timezone_offset(now: datetime | None = None) -> str:
    """Local UTC offset of the host clock as ``+HHMM`` / ``-HHMM``.

    Args:
        now: Datetime to read the offset from. Naive values (and None) are
            interpreted in the host's local timezone.
    """
    moment = now or datetime.now()
    if moment.tzinfo is None:
        moment = moment.astimezone()
    total_minutes = int(moment.utcoffset().total_seconds() // 60)
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def build_headers(token: DramaboxToken, config: Config) -> dict[str, str]:
    """Build the header set the upstream API expects for a token.

    Args:
        token: Current token/device-id pair.
        config: Config supplying the app identity values.

    Returns:
        Header mapping. Only ``time-zone`` depends on anything besides
        the arguments.
    """
    return {
        "User-Agent": UPSTREAM_USER_AGENT,
        "Accept-Encoding": "gzip",
        "Content-Type": "application/json; charset=UTF-8",
        "tn": f"Bearer {token.token}",
        "version": config.version_code,
        "vn": config.version_name,
        "cid": config.cid,
        "package-name": config.package_name,
        "apn": config.apn,
        "device-id": token.device_id,
        "language": config.language,
        "current-language": config.language,
        "p": config.platform_p,
        "time-zone": timezone_offset(),
    }
