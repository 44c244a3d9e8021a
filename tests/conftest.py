from __future__ import annotations

import pytest

from school_portal.core.exceptions import RemoteFetchError


class FakeSheets:
    """In-memory spreadsheet keyed by A1 range, recording every remote call."""

    def __init__(self, ranges=None, *, fail_on=()):
        self.ranges = dict(ranges or {})
        self.fail_on = set(fail_on)
        self.calls = []
        self.appended = []

    def fetch(self, spreadsheet_id, range_spec):
        self.calls.append((spreadsheet_id, range_spec))
        if range_spec in self.fail_on:
            raise RemoteFetchError(f"cannot read {range_spec}")
        return [list(row) for row in self.ranges.get(range_spec, [])]

    def batch_fetch(self, spreadsheet_id, ranges):
        return [self.fetch(spreadsheet_id, r) for r in ranges]

    def append_row(self, spreadsheet_id, range_spec, values):
        self.appended.append((spreadsheet_id, range_spec, list(values)))


@pytest.fixture
def fake_sheets():
    return FakeSheets
