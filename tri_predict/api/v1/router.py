"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from tri_predict.api.v1.routes import predict, races

api_router = APIRouter()

api_router.include_router(predict.router, prefix="/predict", tags=["Prediction"])
api_router.include_router(races.router, prefix="/races", tags=["Races"])
