from ..infrastructure.app_factory import create_application
from ..infrastructure.config.settings import get_settings
from ..interfaces.api import router as api_router

settings = get_settings()

app = create_application(
    router=api_router,
    settings=settings,
    summary="REST API for a multi-library book catalogue",
    description="""
    # Books Store API

    CRUD endpoints for the entities of a book catalogue:

    * **Authors**, **Languages** and **Libraries**
    * **Book Categories**, optionally nested under a parent category
    * **Books**, each linked to one author, library, category and language

    ## Conventions

    - JSON bodies use camelCase field names
    - `POST` answers `201 Created` with a `Location` header
    - `PUT` replaces the whole record and answers `204 No Content`
    - `DELETE` answers `204 No Content`; records still referenced cannot be deleted
    """,
)
