from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional
from ..services.rsvp_service import RSVPService
from ..schemas.rsvp import (
    NewQuestionRequest,
    RSVPConfig,
    RSVPQuestion,
    RSVPQuestionBody,
    RSVPResponse,
    RSVPResponseCreate,
    RSVPStatistics,
    ReorderQuestionsRequest,
    ToggleEnabledRequest,
)
from ..schemas.common import (
    SuccessResponse,
    PaginatedResponse,
    PaginationInfo,
    ResponseFactory,
)
from ..dependencies.rsvp import get_rsvp_service
from ..utils.router_helpers import handle_service_errors
from ..utils.csv_export import build_responses_csv, export_filename
from ..models.enums import AttendanceStatus
from ..utils.constants import AppConstants, ResponseMessages

router = APIRouter(tags=["rsvp"])


# ============================================
# CONFIGURATION
# ============================================


@router.get("/config", response_model=SuccessResponse[RSVPConfig])
@handle_service_errors
async def get_rsvp_config(
    service: RSVPService = Depends(get_rsvp_service),
):
    """Get the wedding's RSVP configuration (defaults when none is stored)"""
    config = await service.get_config()
    return ResponseFactory.success(data=config)


@router.put("/config", response_model=SuccessResponse[RSVPConfig])
@handle_service_errors
async def save_rsvp_config(
    config: RSVPConfig,
    service: RSVPService = Depends(get_rsvp_service),
):
    """Replace the wedding's RSVP configuration"""
    await service.save_config(config)
    return ResponseFactory.success(data=config, message=ResponseMessages.UPDATED)


@router.put("/config/enabled", response_model=SuccessResponse[RSVPConfig])
@handle_service_errors
async def toggle_rsvp_enabled(
    toggle: ToggleEnabledRequest,
    service: RSVPService = Depends(get_rsvp_service),
):
    """Open or close RSVP for the wedding"""
    await service.toggle_enabled(toggle.enabled)
    config = await service.get_config()
    return ResponseFactory.success(data=config, message=ResponseMessages.UPDATED)


# ============================================
# QUESTIONS
# ============================================


@router.get("/questions", response_model=SuccessResponse[List[RSVPQuestion]])
@handle_service_errors
async def get_rsvp_questions(
    service: RSVPService = Depends(get_rsvp_service),
):
    """Get the custom questions sorted by their order"""
    questions = await service.get_questions()
    return ResponseFactory.success(data=questions)


@router.post(
    "/questions",
    response_model=SuccessResponse[List[RSVPQuestion]],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def add_rsvp_question(
    payload: RSVPQuestionBody,
    service: RSVPService = Depends(get_rsvp_service),
):
    await service.add_question(payload.root)
    questions = await service.get_questions()
    return ResponseFactory.created(data=questions)


@router.post(
    "/questions/new",
    response_model=SuccessResponse[RSVPQuestion],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_rsvp_question(
    request: NewQuestionRequest,
    service: RSVPService = Depends(get_rsvp_service),
):
    """Add a blank question of the given type at the end of the list"""
    question = await service.create_question(request.type)
    return ResponseFactory.created(data=question)


# Registered before /questions/{question_id} so "order" is not taken as an id
@router.put("/questions/order", response_model=SuccessResponse[List[RSVPQuestion]])
@handle_service_errors
async def reorder_rsvp_questions(
    reorder: ReorderQuestionsRequest,
    service: RSVPService = Depends(get_rsvp_service),
):
    """Reorder questions; the list given becomes the full question list"""
    await service.reorder_questions(reorder.question_ids)
    questions = await service.get_questions()
    return ResponseFactory.success(data=questions, message=ResponseMessages.UPDATED)


@router.put(
    "/questions/{question_id}", response_model=SuccessResponse[List[RSVPQuestion]]
)
@handle_service_errors
async def update_rsvp_question(
    question_id: str,
    payload: RSVPQuestionBody,
    service: RSVPService = Depends(get_rsvp_service),
):
    question = payload.root.model_copy(update={"id": question_id})
    await service.update_question(question)
    questions = await service.get_questions()
    return ResponseFactory.success(data=questions, message=ResponseMessages.UPDATED)


@router.delete(
    "/questions/{question_id}", response_model=SuccessResponse[List[RSVPQuestion]]
)
@handle_service_errors
async def delete_rsvp_question(
    question_id: str,
    service: RSVPService = Depends(get_rsvp_service),
):
    await service.delete_question(question_id)
    questions = await service.get_questions()
    return ResponseFactory.success(data=questions, message=ResponseMessages.DELETED)


# ============================================
# RESPONSES
# ============================================


@router.get("/responses", response_model=PaginatedResponse[RSVPResponse])
@handle_service_errors
async def get_rsvp_responses(
    page: int = Query(1, ge=1, description="Page number, starting at 1"),
    page_size: int = Query(
        AppConstants.DEFAULT_PAGE_SIZE,
        ge=1,
        le=AppConstants.MAX_PAGE_SIZE,
        description="Responses per page",
    ),
    attendance: Optional[AttendanceStatus] = Query(
        None, description="Filter by attendance"
    ),
    search: Optional[str] = Query(
        None, description="Search respondent name or email"
    ),
    service: RSVPService = Depends(get_rsvp_service),
):
    """Get responses, newest first, with filtering and pagination"""
    result = await service.get_responses(
        page=page, page_size=page_size, attendance=attendance, search=search
    )

    pagination = PaginationInfo.build(page, page_size, result.total)
    return ResponseFactory.paginated(data=result.responses, pagination=pagination)


@router.post(
    "/responses",
    response_model=SuccessResponse[RSVPResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def submit_rsvp_response(
    submission: RSVPResponseCreate,
    service: RSVPService = Depends(get_rsvp_service),
):
    """Submit a guest response"""
    response = await service.submit_response(submission)
    return ResponseFactory.created(data=response)


@router.get("/responses/export")
@handle_service_errors
async def export_rsvp_responses(
    service: RSVPService = Depends(get_rsvp_service),
):
    """Download every response as a CSV file"""
    responses = await _collect_all_responses(service)
    questions = await service.get_questions()

    content = build_responses_csv(responses, questions)
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{export_filename()}"'
        },
    )


@router.get("/responses/{response_id}", response_model=SuccessResponse[RSVPResponse])
@handle_service_errors
async def get_rsvp_response(
    response_id: str,
    service: RSVPService = Depends(get_rsvp_service),
):
    response = await service.get_response(response_id)
    if response is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Response not found"
        )
    return ResponseFactory.success(data=response)


@router.delete("/responses/{response_id}", response_model=SuccessResponse[None])
@handle_service_errors
async def delete_rsvp_response(
    response_id: str,
    service: RSVPService = Depends(get_rsvp_service),
):
    await service.delete_response(response_id)
    return ResponseFactory.success(message=ResponseMessages.DELETED)


# ============================================
# STATISTICS
# ============================================


@router.get("/statistics", response_model=SuccessResponse[RSVPStatistics])
@handle_service_errors
async def get_rsvp_statistics(
    service: RSVPService = Depends(get_rsvp_service),
):
    """Attendance counts for the wedding"""
    statistics = await service.get_statistics()
    return ResponseFactory.success(data=statistics)


async def _collect_all_responses(service: RSVPService) -> List[RSVPResponse]:
    """Walk every page of responses, newest first"""
    collected: List[RSVPResponse] = []
    page = 1

    while True:
        result = await service.get_responses(
            page=page, page_size=AppConstants.EXPORT_PAGE_SIZE
        )
        collected.extend(result.responses)

        if not result.responses or len(collected) >= result.total:
            return collected
        page += 1
