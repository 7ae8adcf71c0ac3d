"""CRUD operations for language entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import Language

language_crud: FastCRUD = FastCRUD(Language)
