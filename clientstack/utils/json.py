import decimal
import json
from datetime import date, datetime, timezone

from .strings import base64_encode


def timestamp_seconds(value: datetime) -> float:
    """Epoch seconds of the given datetime, naive datetimes are treated as UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc).timestamp()


class CustomEncoder(json.JSONEncoder):
    """Helper class to convert JSON request documents with datetime, decimals, or bytes, the way the AWS JSON
    protocols expect them (timestamps as epoch seconds, blobs base64 encoded)."""

    def default(self, o):
        if isinstance(o, decimal.Decimal):
            if o != o.to_integral_value():
                return float(o)
            else:
                return int(o)
        if isinstance(o, (datetime, date)):
            ts = timestamp_seconds(o)
            return int(ts) if ts.is_integer() else ts
        if isinstance(o, (bytes, bytearray)):
            return base64_encode(bytes(o))
        return super(CustomEncoder, self).default(o)
