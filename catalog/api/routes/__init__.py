from catalog.api.routes.languages import router as languages_router
from catalog.api.routes.materials import router as materials_router
from catalog.api.routes.modules import router as modules_router

__all__ = [
    "languages_router",
    "modules_router",
    "materials_router",
]
