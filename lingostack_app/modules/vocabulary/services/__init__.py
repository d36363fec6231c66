from .category_service import CategoryService
from .study_service import StudyContext, StudyService

__all__ = ['CategoryService', 'StudyContext', 'StudyService']
