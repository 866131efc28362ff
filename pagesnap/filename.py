"""Turn a url into an archive friendly png filename.

The name is the last path segment of the url with every ``.`` replaced by
``-``, followed by the local calendar date and the epoch milliseconds of the
capture, so repeated shots of the same page sort by time and never collide.

    https://www.google.com/foo   -> foo-2020-04-27-1588021576101.png
    https://www.google.com       -> www-google-com-2020-04-27-1588021576101.png
"""
import calendar
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def date_to_ymd(now: datetime) -> str:
    """Format the local calendar date of `now` as YYYY-MM-DD.

    Naive datetimes are taken to already be local time.
    """
    local = now.astimezone() if now.tzinfo is not None else now
    return f"{local.year}-{local.month:02d}-{local.day:02d}"


def date_to_milliseconds(now: datetime) -> int:
    """Milliseconds since 1970-01-01T00:00:00Z, rebuilt from the UTC fields of `now`."""
    utc = now.astimezone(timezone.utc)
    return calendar.timegm(utc.timetuple()) * 1000 + utc.microsecond // 1000


def url_to_filename(url: str, now: Optional[datetime] = None) -> str:
    if url == "":
        return ""
    if url.endswith("/"):
        url = url[:-1]
    url = url.replace(".", "-")
    segment = url[url.rfind("/") + 1 :]

    if now is None:
        now = utcnow()
    return f"{segment}-{date_to_ymd(now)}-{date_to_milliseconds(now)}.png"
