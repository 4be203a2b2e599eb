"""
Contact form submission endpoint.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
import logging

from contactform.core.errors import SubmitError
from contactform.core.submission_service import SubmissionService
from contactform.models.contact import ErrorResponse, FormData, SubmissionResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def get_submission_service(request: Request) -> SubmissionService:
    """Returns the service built at startup"""
    return request.app.state.submission_service


@router.post(
    "/submit",
    status_code=status.HTTP_200_OK,
    response_model=SubmissionResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_form(data: FormData, service: SubmissionService = Depends(get_submission_service)):
    """
    Validate and store a contact form submission.

    Args:
        data: name, email and message from the form

    Returns:
        SubmissionResponse: the stored submission with its generated id
    """
    try:
        return await service.submit(data)
    except SubmitError as e:
        return JSONResponse(
            status_code=e.status_code,
            content=ErrorResponse(error=e.message).model_dump(),
        )
