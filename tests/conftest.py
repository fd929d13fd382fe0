from __future__ import annotations

import pytest

from ednprint import canon, data, options


@pytest.fixture(autouse=True)
def _auto_clean(monkeypatch):
    monkeypatch.setattr(
        canon.base, "DISPATCH_TABLE", canon.base.DISPATCH_TABLE.copy()
    )
    monkeypatch.setattr(data, "TAG_TABLE", data.TAG_TABLE.copy())
    monkeypatch.setattr(options, "_defaults", options.Options())
    yield
