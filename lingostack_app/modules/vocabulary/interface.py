"""Public interface for the vocabulary module."""


class VocabularyInterface:
    @staticmethod
    def list_categories():
        """Sorted category names. Raises CategoryStorageError if the folder is unreadable."""
        from .services.category_service import CategoryService
        return CategoryService.list_categories()

    @staticmethod
    def default_mode() -> str:
        from .config import VocabularyModuleDefaultConfig
        return VocabularyModuleDefaultConfig.DEFAULT_MODE
