from __future__ import annotations

import json
import logging
import threading
from typing import Any, List, Optional, Sequence

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..core.exceptions import RemoteFetchError
from .gateway import Grid, SpreadsheetGateway

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


def _as_grid(values: Any, range_spec: str) -> Grid:
    if values is None:
        return []
    if not isinstance(values, list) or any(not isinstance(row, list) for row in values):
        raise RemoteFetchError(f"Malformed values returned for range '{range_spec}'")
    return [["" if cell is None else str(cell) for cell in row] for row in values]


class GoogleSheetsClient(SpreadsheetGateway):
    """Google Sheets API v4 adapter.

    The discovery client is not thread-safe, so each worker thread builds its
    own service object on first use. Tests may pass a ready ``service``.
    """

    def __init__(
        self,
        *,
        credentials_info: Optional[dict] = None,
        credentials_file: Optional[str] = None,
        service: Any = None,
    ):
        self._credentials_info = credentials_info
        self._credentials_file = credentials_file
        self._service = service
        self._local = threading.local()

    @classmethod
    def from_settings(cls, *, credentials_json: str = "", credentials_file: str = "") -> "GoogleSheetsClient":
        info = json.loads(credentials_json) if credentials_json else None
        return cls(credentials_info=info, credentials_file=credentials_file or None)

    def _load_credentials(self) -> Credentials:
        if self._credentials_info:
            return Credentials.from_service_account_info(self._credentials_info, scopes=SCOPES)
        if self._credentials_file:
            return Credentials.from_service_account_file(self._credentials_file, scopes=SCOPES)
        raise RemoteFetchError("Google service account credentials are not configured")

    def _sheets(self):
        if self._service is not None:
            return self._service.spreadsheets()

        service = getattr(self._local, "service", None)
        if service is None:
            try:
                credentials = self._load_credentials()
            except (GoogleAuthError, OSError, ValueError) as e:
                raise RemoteFetchError(f"Cannot load Google credentials: {e}") from e
            service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
            self._local.service = service
        return service.spreadsheets()

    def _execute(self, request, what: str) -> dict:
        try:
            return request.execute() or {}
        except HttpError as e:
            logger.error("Sheets API error on %s: %s", what, e)
            raise RemoteFetchError(f"Sheets API error on {what} (HTTP {e.resp.status})") from e
        except (GoogleAuthError, httplib2.HttpLib2Error, OSError) as e:
            logger.error("Sheets transport error on %s: %s", what, e)
            raise RemoteFetchError(f"Sheets unreachable on {what}: {e}") from e

    def fetch(self, spreadsheet_id: str, range_spec: str) -> Grid:
        logger.debug("Fetching %s from spreadsheet %s", range_spec, spreadsheet_id)
        request = self._sheets().values().get(spreadsheetId=spreadsheet_id, range=range_spec)
        data = self._execute(request, f"get '{range_spec}'")
        return _as_grid(data.get("values"), range_spec)

    def batch_fetch(self, spreadsheet_id: str, ranges: Sequence[str]) -> List[Grid]:
        request = self._sheets().values().batchGet(spreadsheetId=spreadsheet_id, ranges=list(ranges))
        data = self._execute(request, f"batchGet {list(ranges)}")
        value_ranges = data.get("valueRanges") or []
        if len(value_ranges) != len(ranges):
            raise RemoteFetchError(f"Expected {len(ranges)} value ranges, got {len(value_ranges)}")
        return [_as_grid(vr.get("values"), rng) for vr, rng in zip(value_ranges, ranges)]

    def append_row(self, spreadsheet_id: str, range_spec: str, values: Sequence[object]) -> None:
        request = self._sheets().values().append(
            spreadsheetId=spreadsheet_id,
            range=range_spec,
            valueInputOption="USER_ENTERED",
            body={"values": [list(values)]},
        )
        self._execute(request, f"append '{range_spec}'")
