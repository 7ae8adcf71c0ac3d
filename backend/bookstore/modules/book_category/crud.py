"""CRUD operations for book category entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import BookCategory

book_category_crud: FastCRUD = FastCRUD(BookCategory)
