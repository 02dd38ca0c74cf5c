from fastapi import APIRouter
from cookbook_auth.api.routes import auth_router, pages_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(pages_router)
