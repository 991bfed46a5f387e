"""
RSVP storage adapters.

`RSVPStore` is the capability the RSVP service needs from a backend. Two
adapters implement it:

- `LocalRSVPStore` keeps every wedding's RSVP data in one JSON document stored
  under a fixed key in the local SQL database (demo mode).
- `SupabaseRSVPStore` talks to the `rsvp_config` / `rsvp_responses` tables and
  maps their snake_case rows onto the domain models.

Adapters never swallow backend errors; the service decides what a failure
means for the caller.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError
from sqlalchemy.orm import sessionmaker
from supabase import Client

from .. import database
from ..database import session_scope
from ..models.demo_storage import DemoStorageEntry
from ..models.enums import AttendanceStatus
from ..schemas.rsvp import RSVPConfig, RSVPResponse
from ..utils.constants import DEMO_RSVP_STORAGE_KEY, RSVPDefaults
from ..utils.service_helpers import utcnow

logger = logging.getLogger(__name__)


@dataclass
class AttendanceRow:
    """The two columns the statistics need from a response"""

    attendance: str
    guest_count: int


class RSVPStore(ABC):
    """Backend capability used by RSVPService"""

    @abstractmethod
    def load_config(self, wedding_id: str) -> Optional[RSVPConfig]:
        pass

    @abstractmethod
    def save_config(self, wedding_id: str, config: RSVPConfig) -> None:
        pass

    @abstractmethod
    def list_responses(
        self,
        wedding_id: str,
        page: int,
        page_size: int,
        attendance: Optional[AttendanceStatus] = None,
        search: Optional[str] = None,
    ) -> Tuple[List[RSVPResponse], int]:
        """Filtered, newest-first page of responses and the filtered total"""
        pass

    @abstractmethod
    def get_response(
        self, wedding_id: str, response_id: str
    ) -> Optional[RSVPResponse]:
        pass

    @abstractmethod
    def insert_response(self, response: RSVPResponse) -> RSVPResponse:
        pass

    @abstractmethod
    def delete_response(self, wedding_id: str, response_id: str) -> None:
        pass

    @abstractmethod
    def attendance_rows(self, wedding_id: str) -> List[AttendanceRow]:
        pass


# ============================================
# LOCAL (DEMO) STORE
# ============================================


def _empty_document() -> Dict[str, Any]:
    return {"configs": {}, "responses": {}}


def _parse_document(raw: Optional[str]) -> Dict[str, Any]:
    """Decode the stored document; anything unreadable counts as empty"""
    if not raw:
        return _empty_document()

    try:
        document = json.loads(raw)
    except ValueError:
        logger.warning("Demo RSVP document is not valid JSON, starting empty")
        return _empty_document()

    if not isinstance(document, dict):
        return _empty_document()
    if not isinstance(document.get("configs"), dict):
        document["configs"] = {}
    if not isinstance(document.get("responses"), dict):
        document["responses"] = {}
    return document


class LocalRSVPStore(RSVPStore):
    def __init__(
        self,
        session_factory: Optional[sessionmaker] = None,
        storage_key: str = DEMO_RSVP_STORAGE_KEY,
    ):
        self.session_factory = session_factory or database.SessionLocal
        self.storage_key = storage_key

    def _read(self) -> Dict[str, Any]:
        with session_scope(self.session_factory) as db:
            entry = (
                db.query(DemoStorageEntry)
                .filter(DemoStorageEntry.key == self.storage_key)
                .first()
            )
            raw = entry.value if entry else None
        return _parse_document(raw)

    def _write(self, document: Dict[str, Any]) -> None:
        payload = json.dumps(document)
        with session_scope(self.session_factory) as db:
            entry = (
                db.query(DemoStorageEntry)
                .filter(DemoStorageEntry.key == self.storage_key)
                .first()
            )
            if entry:
                entry.value = payload
            else:
                db.add(DemoStorageEntry(key=self.storage_key, value=payload))

    def _wedding_responses(
        self, document: Dict[str, Any], wedding_id: str
    ) -> List[RSVPResponse]:
        responses = []
        for raw in document["responses"].get(wedding_id) or []:
            try:
                responses.append(RSVPResponse.model_validate(raw))
            except ValidationError as e:
                logger.warning(f"Skipping unreadable demo RSVP response: {e}")
        return responses

    def load_config(self, wedding_id: str) -> Optional[RSVPConfig]:
        raw = self._read()["configs"].get(wedding_id)
        if raw is None:
            return None

        try:
            return RSVPConfig.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable demo RSVP config: {e}")
            return None

    def save_config(self, wedding_id: str, config: RSVPConfig) -> None:
        document = self._read()
        document["configs"][wedding_id] = config.to_json_dict()
        self._write(document)

    def list_responses(
        self,
        wedding_id: str,
        page: int,
        page_size: int,
        attendance: Optional[AttendanceStatus] = None,
        search: Optional[str] = None,
    ) -> Tuple[List[RSVPResponse], int]:
        responses = self._wedding_responses(self._read(), wedding_id)

        if attendance:
            responses = [r for r in responses if r.attendance == attendance]

        if search:
            search_lower = search.lower()
            responses = [
                r
                for r in responses
                if search_lower in r.respondent_name.lower()
                or search_lower in (r.respondent_email or "").lower()
            ]

        # Newest first
        responses.sort(key=lambda r: r.created_at, reverse=True)

        total = len(responses)
        start = (page - 1) * page_size
        return responses[start : start + page_size], total

    def get_response(
        self, wedding_id: str, response_id: str
    ) -> Optional[RSVPResponse]:
        for response in self._wedding_responses(self._read(), wedding_id):
            if response.id == response_id:
                return response
        return None

    def insert_response(self, response: RSVPResponse) -> RSVPResponse:
        document = self._read()
        document["responses"].setdefault(response.wedding_id, []).append(
            response.to_json_dict()
        )
        self._write(document)
        return response

    def delete_response(self, wedding_id: str, response_id: str) -> None:
        document = self._read()
        stored = document["responses"].get(wedding_id)
        if stored is None:
            return

        document["responses"][wedding_id] = [
            raw
            for raw in stored
            if not (isinstance(raw, dict) and raw.get("id") == response_id)
        ]
        self._write(document)

    def attendance_rows(self, wedding_id: str) -> List[AttendanceRow]:
        return [
            AttendanceRow(attendance=r.attendance.value, guest_count=len(r.guests))
            for r in self._wedding_responses(self._read(), wedding_id)
        ]


# ============================================
# REMOTE (SUPABASE) STORE
# ============================================


def _column(row: Dict[str, Any], column: str, default: Any) -> Any:
    value = row.get(column)
    return default if value is None else value


def _config_from_row(row: Dict[str, Any]) -> RSVPConfig:
    return RSVPConfig(
        enabled=_column(row, "enabled", RSVPDefaults.ENABLED),
        questions=row.get("questions") or [],
        deadline=row.get("deadline"),
        welcome_message=row.get("welcome_message"),
        thank_you_message=row.get("thank_you_message"),
        allow_plus_one=_column(row, "allow_plus_one", RSVPDefaults.ALLOW_PLUS_ONE),
        ask_dietary_restrictions=_column(
            row, "ask_dietary_restrictions", RSVPDefaults.ASK_DIETARY_RESTRICTIONS
        ),
        max_guests_per_response=_column(
            row, "max_guests_per_response", RSVPDefaults.MAX_GUESTS_PER_RESPONSE
        ),
    )


def _response_from_row(row: Dict[str, Any]) -> RSVPResponse:
    return RSVPResponse(
        id=str(row["id"]),
        wedding_id=str(row["wedding_id"]),
        respondent_name=row["respondent_name"],
        respondent_email=row.get("respondent_email"),
        respondent_phone=row.get("respondent_phone"),
        attendance=row["attendance"],
        guests=row.get("guests") or [],
        answers=row.get("answers") or [],
        message=row.get("message"),
        created_at=row["created_at"],
        updated_at=row.get("updated_at") or row["created_at"],
    )


def _search_term(search: str) -> str:
    """Literal ilike operand: LIKE wildcards escaped, filter syntax blanked"""
    term = re.sub(r"([\\%_])", r"\\\1", search)
    # Commas and parentheses are PostgREST filter syntax
    return re.sub(r"[,()]", " ", term)


class SupabaseRSVPStore(RSVPStore):
    CONFIG_TABLE = "rsvp_config"
    RESPONSES_TABLE = "rsvp_responses"

    def __init__(self, client: Client):
        self.client = client

    def load_config(self, wedding_id: str) -> Optional[RSVPConfig]:
        result = (
            self.client.table(self.CONFIG_TABLE)
            .select("*")
            .eq("wedding_id", wedding_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return _config_from_row(result.data[0])

    def save_config(self, wedding_id: str, config: RSVPConfig) -> None:
        data = config.to_json_dict()
        row = {
            "wedding_id": wedding_id,
            "enabled": data["enabled"],
            "questions": data["questions"],
            "deadline": data["deadline"],
            "welcome_message": data["welcomeMessage"],
            "thank_you_message": data["thankYouMessage"],
            "allow_plus_one": data["allowPlusOne"],
            "ask_dietary_restrictions": data["askDietaryRestrictions"],
            "max_guests_per_response": data["maxGuestsPerResponse"],
            "updated_at": utcnow().isoformat(),
        }
        self.client.table(self.CONFIG_TABLE).upsert(
            row, on_conflict="wedding_id"
        ).execute()

    def list_responses(
        self,
        wedding_id: str,
        page: int,
        page_size: int,
        attendance: Optional[AttendanceStatus] = None,
        search: Optional[str] = None,
    ) -> Tuple[List[RSVPResponse], int]:
        query = (
            self.client.table(self.RESPONSES_TABLE)
            .select("*", count="exact")
            .eq("wedding_id", wedding_id)
        )

        if attendance:
            query = query.eq("attendance", AttendanceStatus(attendance).value)

        if search:
            term = _search_term(search)
            query = query.or_(
                f"respondent_name.ilike.%{term}%,respondent_email.ilike.%{term}%"
            )

        start = (page - 1) * page_size
        result = (
            query.order("created_at", desc=True)
            .range(start, start + page_size - 1)
            .execute()
        )

        responses = [_response_from_row(row) for row in result.data or []]
        return responses, result.count or 0

    def get_response(
        self, wedding_id: str, response_id: str
    ) -> Optional[RSVPResponse]:
        result = (
            self.client.table(self.RESPONSES_TABLE)
            .select("*")
            .eq("id", response_id)
            .eq("wedding_id", wedding_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return _response_from_row(result.data[0])

    def insert_response(self, response: RSVPResponse) -> RSVPResponse:
        data = response.to_json_dict()
        row = {
            "id": response.id,
            "wedding_id": response.wedding_id,
            "respondent_name": data["respondentName"],
            "respondent_email": data["respondentEmail"],
            "respondent_phone": data["respondentPhone"],
            "attendance": data["attendance"],
            "guests": data["guests"],
            "answers": data["answers"],
            "message": data["message"],
            "created_at": data["createdAt"],
            "updated_at": data["updatedAt"],
        }
        result = self.client.table(self.RESPONSES_TABLE).insert(row).execute()
        if not result.data:
            return response
        return _response_from_row(result.data[0])

    def delete_response(self, wedding_id: str, response_id: str) -> None:
        (
            self.client.table(self.RESPONSES_TABLE)
            .delete()
            .eq("id", response_id)
            .eq("wedding_id", wedding_id)
            .execute()
        )

    def attendance_rows(self, wedding_id: str) -> List[AttendanceRow]:
        result = (
            self.client.table(self.RESPONSES_TABLE)
            .select("attendance, guests")
            .eq("wedding_id", wedding_id)
            .execute()
        )
        return [
            AttendanceRow(
                attendance=row.get("attendance"),
                guest_count=len(row.get("guests") or []),
            )
            for row in result.data or []
        ]


def build_rsvp_store(
    demo_mode: bool = False,
    session_factory: Optional[sessionmaker] = None,
    client: Optional[Client] = None,
) -> RSVPStore:
    """Pick the backend: demo mode or a missing Supabase client means local"""
    if demo_mode or database.DEMO_MODE:
        return LocalRSVPStore(session_factory)

    if client is None:
        if not database.is_supabase_configured():
            return LocalRSVPStore(session_factory)
        client = database.get_supabase()

    return SupabaseRSVPStore(client)
