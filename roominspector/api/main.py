from fastapi import APIRouter

from roominspector.api.routes import databases, query, rows, tables

api_router = APIRouter()
api_router.include_router(databases.router)
api_router.include_router(tables.router)
api_router.include_router(rows.router)
api_router.include_router(query.router)
