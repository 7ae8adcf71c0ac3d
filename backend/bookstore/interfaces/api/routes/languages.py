"""Language API endpoints."""

from ....modules.language.schemas import LanguageCreate, LanguageRead, LanguageReplace
from ..dependencies import get_language_service
from .crud_router import create_crud_router

router = create_crud_router(
    prefix="/Languages",
    tag="Languages",
    entity_name="Language",
    service_dependency=get_language_service,
    create_schema=LanguageCreate,
    replace_schema=LanguageReplace,
    read_schema=LanguageRead,
)
