"""
``ednprint.tagged``: Tagged literals for common types
=====================================================

+ :class:`datetime.datetime` and :class:`msgpack.Timestamp`: ``#inst``
+ :class:`uuid.UUID`: ``#uuid``
+ :class:`msgpack.ExtType`: ``#msgpack/ext [code "hex data"]``

    >>> from ednprint.printer import pprint
    >>> pprint(uuid.UUID(int=1))
    #uuid "00000000-0000-0000-0000-000000000001"
    >>> utc = datetime.timezone.utc
    >>> pprint(datetime.datetime(2022, 5, 1, 12, 30, tzinfo=utc))
    #inst "2022-05-01T12:30:00.000+00:00"
"""

from __future__ import annotations

import datetime
import uuid

import msgpack

from .data import register_tag

__all__ = ("format_inst",)


def format_inst(dt: datetime.datetime) -> str:
    """RFC 3339 representation of *dt* with millisecond precision

    Naive datetimes are printed without an offset.
    """
    return dt.isoformat(timespec="milliseconds")


def _ext_payload(ext: msgpack.ExtType) -> list[object]:
    return [ext.code, ext.data.hex()]


register_tag(datetime.datetime, "inst", format_inst)
register_tag(uuid.UUID, "uuid", str)
register_tag(
    msgpack.Timestamp,
    "inst",
    lambda ts: format_inst(ts.to_datetime()),
)
register_tag(msgpack.ExtType, "msgpack/ext", _ext_payload)
