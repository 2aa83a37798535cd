from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from highlight_qa.schemas.query import QueryRequest, QueryResponse
from highlight_qa.services.query_service import QueryService


router = APIRouter()


def get_service(request: Request) -> QueryService:
    # Built once in create_app and shared by every request.
    return request.app.state.query_service


@router.post(
    "/query",
    response_model=QueryResponse,
    response_model_exclude_none=True,
    summary="Answer questions about highlighted text",
    responses={500: {"model": QueryResponse, "description": "LLM call failed"}},
)
async def query_llm(
    payload: QueryRequest,
    service: QueryService = Depends(get_service),
) -> JSONResponse:
    """
    Send the highlighted text to the configured LLM and return its answer.
    """
    result = await service.dispatch(payload.text)
    status_code = status.HTTP_200_OK if result.is_success else status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=status_code, content=result.to_payload())
