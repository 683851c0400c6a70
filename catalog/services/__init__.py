from catalog.services.filtering import FilterChain
from catalog.services.language_service import LanguageService
from catalog.services.material_service import MaterialService
from catalog.services.module_service import ModuleService
from catalog.services.ordering import ReorderEngine

__all__ = [
    "FilterChain",
    "LanguageService",
    "MaterialService",
    "ModuleService",
    "ReorderEngine",
]
