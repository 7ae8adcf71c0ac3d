"""Language management service."""

from ..common.services import EntityCrudService
from .crud import language_crud
from .models import Language
from .schemas import LanguageCreate, LanguageRead, LanguageReplace


class LanguageService(EntityCrudService[Language, LanguageCreate, LanguageReplace, LanguageRead]):
    """Service for managing languages."""

    entity_name = "Language"
    model = Language
    crud = language_crud
    read_schema = LanguageRead
