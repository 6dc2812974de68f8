from datetime import timedelta, timezone as dt_tz

KST = dt_tz(timedelta(hours=9))

def to_kst_iso(dt_utc):
    return dt_utc.astimezone(KST).isoformat()
