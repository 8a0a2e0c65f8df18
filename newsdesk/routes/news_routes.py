# newsdesk/routes/news_routes.py
import logging

from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.responses import StreamingResponse

from newsdesk.controllers.news_controller import create_breaking_stream, get_news, list_regions
from newsdesk.models.news import NewsResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=NewsResponse)
async def list_news(
    q: str = Query("", description="Free-text filter on title and snippet"),
    category: str = Query("all", description="sports, tech, economics, politics, crime or all"),
    state: str = Query("all", description="Region code such as TN, or all"),
):
    """
    Get the latest articles from all configured feeds

    Feeds that fail or time out are skipped, so an empty list is still a
    successful response.
    """
    try:
        return await get_news(q, category, state)
    except Exception:
        logger.exception("News aggregation failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch news"
        )


@router.get("/regions")
async def get_regions():
    """Get all supported region codes"""
    return {"regions": [r.model_dump(by_alias=True) for r in list_regions()]}


@router.get("/stream")
async def stream_breaking_news(
    request: Request,
    q: str = Query(""),
    category: str = Query("all"),
    state: str = Query("all"),
):
    """SSE endpoint -- pushes breaking articles matching the filters"""
    stream = create_breaking_stream()
    return StreamingResponse(
        stream.events(q, category, state, request.is_disconnected),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache, no-transform",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
