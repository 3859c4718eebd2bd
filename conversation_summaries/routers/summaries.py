from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from conversation_summaries.client.connection import api_client_dependency
from conversation_summaries.client.http_transport import HttpTransport
from conversation_summaries.core.config import settings
from conversation_summaries.errors import InvalidArgument, ParseError, TransportFailure, TransportFault
from conversation_summaries.repositories.conversation_repository import ConversationRepository
from conversation_summaries.repositories.message_repository import MessageRepository
from conversation_summaries.repositories.user_repository import UserRepository
from conversation_summaries.schemas.summary import ConversationSummary
from conversation_summaries.services.summary_service import SummaryService
from conversation_summaries.services.summary_stages import ApiSummaryStages


router = APIRouter(prefix="/conversations", tags=["summaries"])


def get_summary_service(transport: HttpTransport = Depends(api_client_dependency)) -> SummaryService:
    stages = ApiSummaryStages(
        ConversationRepository(transport),
        MessageRepository(transport),
        UserRepository(transport),
        max_concurrency=settings.MAX_CONCURRENCY,
    )
    return SummaryService(stages)


@router.get("/summaries", response_model=List[ConversationSummary])
async def list_summaries(service: SummaryService = Depends(get_summary_service)):
    try:
        return await service.get_recent_conversation_summaries()
    except TransportFailure as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=exc.category)
    except TransportFault as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))
    except (InvalidArgument, ParseError) as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
