from datetime import datetime, timezone, timedelta

from faculty_portal.config import settings

local_tz = timezone(timedelta(hours=settings.LOCAL_UTC_OFFSET_HOURS))


def get_utc_time():
    return datetime.now(timezone.utc)


def get_local_time():
    return datetime.now(local_tz)


def local_to_utc(date_value: str, time_value: str) -> datetime:
    """Combine form date and time strings read in the local zone into a UTC datetime.

    Dates must be YYYY-MM-DD and times HH:MM or HH:MM:SS, zero padded;
    anything else raises ValueError.
    """
    day = datetime.strptime(date_value, "%Y-%m-%d")
    if day.strftime("%Y-%m-%d") != date_value:
        raise ValueError(f"Date {date_value!r} is not zero padded")

    for time_format in ("%H:%M", "%H:%M:%S"):
        try:
            clock = datetime.strptime(time_value, time_format)
        except ValueError:
            continue
        if clock.strftime(time_format) == time_value:
            break
    else:
        raise ValueError(f"Time {time_value!r} is not HH:MM or HH:MM:SS")

    naive = datetime.combine(day.date(), clock.time())
    return naive.replace(tzinfo=local_tz).astimezone(timezone.utc)
