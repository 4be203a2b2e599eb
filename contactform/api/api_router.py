from fastapi import APIRouter
from contactform.api.endpoints import submit

api_router = APIRouter()

api_router.include_router(submit.router, tags=["Submissions"])
