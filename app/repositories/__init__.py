"""
Repositories package
Database queries live here, separate from the models.

Each repository encapsulates database operations for a model:
- tag_repository.py
- article_repository.py

Usage:
    from repositories.tag_repository import TagRepository
    tag = TagRepository.find_by_name("batman")
"""
