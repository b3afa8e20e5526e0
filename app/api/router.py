from fastapi import APIRouter
from api.routes.system import router as system_router
from api.routes.lang import router as lang_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(lang_router)
