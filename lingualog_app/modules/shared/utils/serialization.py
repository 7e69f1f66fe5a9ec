from datetime import timezone

from marshmallow import fields


class UTCDateTime(fields.DateTime):
    """ISO-8601 datetime that treats naive values (as SQLite returns them) as UTC."""

    def _serialize(self, value, attr, obj, **kwargs):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return super()._serialize(value, attr, obj, **kwargs)
