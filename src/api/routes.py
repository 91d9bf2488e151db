"""
API routes - Prompt enhancement endpoint.

This module defines the HTTP endpoints:
- POST /api/enhancePrompt - Rewrite a prompt through the completion API
- OPTIONS /api/enhancePrompt - Pre-flight, 200 with empty body
- any other method - 405 Method not allowed
"""

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from src.api.dependencies import get_enhancement_service
from src.api.models import EnhancePromptRequest, EnhancePromptResponse, ErrorResponse
from src.domain.enhancement import EnhancementService, resolve_method
from src.domain.exceptions import EnhancementFailed, MissingPrompt
from src.domain.ports import MethodDecision

router = APIRouter(tags=["enhance"])

OTHER_METHODS = ["GET", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


@router.post(
    "/enhancePrompt",
    response_model=EnhancePromptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing prompt or invalid body"},
        405: {"model": ErrorResponse, "description": "Method not allowed"},
        500: {"model": ErrorResponse, "description": "Failed to enhance prompt"},
    },
    summary="Enhance a prompt",
    description="Rewrite the prompt in the requested style. "
    "Temperature is derived from creativity (creativity / 10, default 0.5).",
)
def enhance_prompt(
    request_data: EnhancePromptRequest | None = Body(None),
    service: EnhancementService = Depends(get_enhancement_service),
) -> EnhancePromptResponse:
    """
    Enhance a prompt.

    - **prompt**: Text to rewrite (required, non-blank)
    - **style**: Free-form style name, interpolated as given
    - **creativity**: 0-10 scale, not clamped

    Upstream failures always return the same generic 500 error.
    """
    data = request_data or EnhancePromptRequest()
    try:
        enhanced = service.enhance(data.prompt, data.style, data.creativity)
    except MissingPrompt:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing prompt",
        ) from None
    except EnhancementFailed:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to enhance prompt",
        ) from None
    return EnhancePromptResponse(enhanced_prompt=enhanced)


@router.api_route("/enhancePrompt", methods=OTHER_METHODS, include_in_schema=False)
async def enhance_prompt_other_methods(request: Request) -> Response:
    """Answer pre-flight with an empty 200; reject every other method."""
    if resolve_method(request.method) is MethodDecision.PREFLIGHT:
        return Response(status_code=status.HTTP_200_OK)
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method not allowed",
    )
