from fastapi import APIRouter
from app.routers import employees, leave, leave_types

# Centralized API router hub
# Routers are aggregated here, and main.py only imports this single hub.
api_router = APIRouter()

api_router.include_router(employees.router, tags=["Employees"])
api_router.include_router(leave_types.router, tags=["Leave Types"])
api_router.include_router(leave.router, tags=["Leave Requests"])
