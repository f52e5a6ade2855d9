"""
Recordbook: FastAPI Dependencies
===================================

What:  Providers that hand route handlers the objects built by create_app().
How:   create_app() stores the Settings and the RecordStore on app.state;
       these functions read them back from the current request. Injected
       via FastAPI's Depends().

Example usage in a route:
    @router.get("/users")
    async def list_records(store: RecordStore = Depends(get_record_store)):
        return await store.get_all()
"""

from fastapi import Request

from recordbook.config import Settings
from recordbook.services.record_store import RecordStore


def get_record_store(request: Request) -> RecordStore:
    return request.app.state.record_store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
