"""Tests for the application factory."""

import anyio
import pytest
from fastapi import APIRouter, FastAPI

from bookstore.infrastructure.app_factory import create_application, lifespan_factory
from bookstore.infrastructure.config.settings import get_settings


@pytest.mark.asyncio
async def test_lifespan_sets_threadpool_tokens_without_creating_tables():
    app = FastAPI()
    lifespan = lifespan_factory(get_settings(), create_tables_on_startup=False)

    async with lifespan(app):
        assert anyio.to_thread.current_default_thread_limiter().total_tokens == 100

    assert not hasattr(app.state, "initialization_complete")


def test_create_application_registers_router():
    router = APIRouter()

    @router.get("/ping")
    async def ping():
        return {"pong": True}

    app = create_application(router=router, title="Catalogue")

    assert app.title == "Catalogue"
    assert "/ping" in {route.path for route in app.routes}
