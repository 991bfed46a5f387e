from fastapi import APIRouter
from ..services.statistics_service import calculate_enhanced_statistics
from ..schemas.statistics import EnhancedStatistics, EnhancedStatisticsRequest
from ..schemas.common import SuccessResponse, ResponseFactory
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["statistics"])


@router.post("/enhanced", response_model=SuccessResponse[EnhancedStatistics])
@handle_service_errors
async def get_enhanced_statistics(request: EnhancedStatisticsRequest):
    """Dashboard analytics computed from the media and guestbook sent in"""
    statistics = calculate_enhanced_statistics(request.media, request.messages)
    return ResponseFactory.success(data=statistics)
