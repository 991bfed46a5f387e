import logging
from typing import List, Optional

from ..models.enums import AttendanceStatus, QuestionType
from ..schemas.rsvp import (
    RSVPConfig,
    RSVPQuestion,
    RSVPResponse,
    RSVPResponseCreate,
    RSVPResponsePage,
    RSVPStatistics,
)
from ..utils.constants import AppConstants, RSVPLimits
from ..utils.rsvp_helpers import create_question
from ..utils.service_helpers import generate_id, utcnow
from ..utils.validation import ValidationHelpers
from .rsvp_store import AttendanceRow, RSVPStore

logger = logging.getLogger(__name__)


# Custom Exceptions
class RSVPServiceError(Exception):
    """Base exception for RSVP service errors"""

    pass


class RSVPValidationError(RSVPServiceError):
    """RSVP limits or answers rejected"""

    pass


class QuestionNotFoundError(RSVPServiceError):
    """Question not found"""

    pass


class RSVPClosedError(RSVPServiceError):
    """Submission while the wedding's RSVP is disabled"""

    pass


class RSVPService:
    """
    Read/write boundary for one wedding's RSVP configuration and responses.

    Reads never raise: a backend failure is logged and turned into an empty
    or default value. Writes log and re-raise so the caller can tell the user.
    """

    def __init__(self, wedding_id: str, store: RSVPStore):
        self.wedding_id = wedding_id
        self.store = store

    # ============================================
    # CONFIGURATION METHODS
    # ============================================

    async def get_config(self) -> RSVPConfig:
        """Stored configuration, or a fresh default one"""
        try:
            config = self.store.load_config(self.wedding_id)
        except Exception as e:
            logger.error(f"Failed to get RSVP config for {self.wedding_id}: {e}")
            return RSVPConfig.default()

        return config if config is not None else RSVPConfig.default()

    async def save_config(self, config: RSVPConfig) -> None:
        self._check_question_limit(len(config.questions))

        try:
            self.store.save_config(self.wedding_id, config)
        except Exception as e:
            logger.error(f"Failed to save RSVP config for {self.wedding_id}: {e}")
            raise

    async def toggle_enabled(self, enabled: bool) -> None:
        config = await self.get_config()
        config.enabled = enabled
        await self.save_config(config)

    # ============================================
    # QUESTION METHODS
    # ============================================

    async def get_questions(self) -> List[RSVPQuestion]:
        config = await self.get_config()
        return sorted(config.questions, key=lambda q: q.order)

    async def add_question(self, question: RSVPQuestion) -> RSVPQuestion:
        """Append a question; it always goes last, whatever order it was sent with"""
        config = await self.get_config()
        self._check_question_limit(len(config.questions) + 1)

        if any(q.id == question.id for q in config.questions):
            raise RSVPValidationError(f"Question {question.id} already exists")

        question = question.model_copy(update={"order": len(config.questions)})
        config.questions.append(question)
        await self.save_config(config)
        return question

    async def create_question(self, question_type: QuestionType) -> RSVPQuestion:
        """Add a blank question of the given type with default settings"""
        config = await self.get_config()
        question = create_question(
            question_type, self.wedding_id, len(config.questions)
        )
        return await self.add_question(question)

    async def update_question(self, question: RSVPQuestion) -> None:
        config = await self.get_config()
        index = next(
            (i for i, q in enumerate(config.questions) if q.id == question.id), None
        )

        if index is None:
            raise QuestionNotFoundError("Question not found")

        config.questions[index] = question.model_copy(update={"updated_at": utcnow()})
        await self.save_config(config)

    async def delete_question(self, question_id: str) -> None:
        config = await self.get_config()
        config.questions = [q for q in config.questions if q.id != question_id]

        # Keep order dense: 0..N-1
        for index, question in enumerate(config.questions):
            question.order = index

        await self.save_config(config)

    async def reorder_questions(self, question_ids: List[str]) -> None:
        """
        Rebuild the question list in the given order.

        Ids that match no question are dropped, as are questions whose id is
        not listed.
        """
        config = await self.get_config()
        questions_by_id = {q.id: q for q in config.questions}

        reordered = []
        unknown = []
        for question_id in question_ids:
            question = questions_by_id.pop(question_id, None)
            if question is None:
                unknown.append(question_id)
                continue
            reordered.append(question.model_copy(update={"order": len(reordered)}))

        if unknown:
            logger.warning(
                f"Ignoring unknown question ids while reordering {self.wedding_id}: {unknown}"
            )

        config.questions = reordered
        await self.save_config(config)

    # ============================================
    # RESPONSE METHODS
    # ============================================

    async def get_responses(
        self,
        page: int = 1,
        page_size: int = AppConstants.DEFAULT_PAGE_SIZE,
        attendance: Optional[AttendanceStatus] = None,
        search: Optional[str] = None,
    ) -> RSVPResponsePage:
        """Newest-first page of responses; `total` counts all filtered responses"""
        page = max(page, 1)
        page_size = max(page_size, 1)
        search = search or None

        try:
            responses, total = self.store.list_responses(
                self.wedding_id,
                page=page,
                page_size=page_size,
                attendance=attendance,
                search=search,
            )
        except Exception as e:
            logger.error(f"Failed to get RSVP responses for {self.wedding_id}: {e}")
            return RSVPResponsePage(responses=[], total=0)

        return RSVPResponsePage(responses=responses, total=total)

    async def get_response(self, response_id: str) -> Optional[RSVPResponse]:
        try:
            return self.store.get_response(self.wedding_id, response_id)
        except Exception as e:
            logger.error(f"Failed to get RSVP response {response_id}: {e}")
            return None

    async def submit_response(self, submission: RSVPResponseCreate) -> RSVPResponse:
        """Validate and store a guest response (guest-facing)"""
        config = await self.get_config()

        if not config.enabled:
            raise RSVPClosedError("RSVP is closed for this wedding")

        if not ValidationHelpers.validate_guest_count(
            submission.guests, config.max_guests_per_response
        ):
            raise RSVPValidationError(
                f"Maximum {config.max_guests_per_response} guests per response"
            )

        errors = ValidationHelpers.validate_answers(
            config.questions, submission.answers
        )
        if errors:
            raise RSVPValidationError("; ".join(errors))

        now = utcnow()
        response = RSVPResponse(
            **submission.model_dump(),
            id=generate_id(),
            wedding_id=self.wedding_id,
            created_at=now,
            updated_at=now,
        )

        try:
            return self.store.insert_response(response)
        except Exception as e:
            logger.error(f"Failed to submit RSVP response for {self.wedding_id}: {e}")
            raise

    async def delete_response(self, response_id: str) -> None:
        """Hard delete; deleting an unknown id is a no-op"""
        try:
            self.store.delete_response(self.wedding_id, response_id)
        except Exception as e:
            logger.error(f"Failed to delete RSVP response {response_id}: {e}")
            raise

    # ============================================
    # STATISTICS METHODS
    # ============================================

    async def get_statistics(self) -> RSVPStatistics:
        try:
            rows = self.store.attendance_rows(self.wedding_id)
        except Exception as e:
            logger.error(f"Failed to get RSVP statistics for {self.wedding_id}: {e}")
            return RSVPStatistics()

        return self._summarize(rows)

    # ============================================
    # HELPER METHODS
    # ============================================

    @staticmethod
    def _summarize(rows: List[AttendanceRow]) -> RSVPStatistics:
        attending = [r for r in rows if r.attendance == AttendanceStatus.YES.value]

        return RSVPStatistics(
            total=len(rows),
            attending=len(attending),
            not_attending=sum(
                1 for r in rows if r.attendance == AttendanceStatus.NO.value
            ),
            maybe=sum(1 for r in rows if r.attendance == AttendanceStatus.MAYBE.value),
            # The respondent plus everyone they bring
            total_guests=sum(r.guest_count + 1 for r in attending),
        )

    def _check_question_limit(self, count: int) -> None:
        if not ValidationHelpers.validate_question_count(count):
            raise RSVPValidationError(
                f"Maximum {RSVPLimits.MAX_QUESTIONS_PER_WEDDING} questions allowed"
            )
