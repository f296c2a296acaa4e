"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from debter.api.routes import rooms, payments, fx_rates

api_router = APIRouter()

# Include all route modules
api_router.include_router(rooms.router)
api_router.include_router(payments.router)
api_router.include_router(fx_rates.router)
