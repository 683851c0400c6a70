from catalog.schemas.common import (
    CamelModel,
    ErrorResponse,
    PaginatedResponse,
    PaginationResponse,
    ReorderItem,
    ResponseMeta,
    SuccessResponse,
)
from catalog.schemas.language import (
    LanguageCreate,
    LanguageQuery,
    LanguageResponse,
    LanguageUpdate,
)
from catalog.schemas.module import (
    ModuleCreate,
    ModuleQuery,
    ModuleResponse,
    ModuleUpdate,
    ReorderModulesRequest,
)
from catalog.schemas.material import (
    MaterialCreate,
    MaterialQuery,
    MaterialResponse,
    MaterialUpdate,
    ReorderMaterialsRequest,
)

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "PaginatedResponse",
    "PaginationResponse",
    "ReorderItem",
    "ResponseMeta",
    "SuccessResponse",
    "LanguageCreate",
    "LanguageQuery",
    "LanguageResponse",
    "LanguageUpdate",
    "ModuleCreate",
    "ModuleQuery",
    "ModuleResponse",
    "ModuleUpdate",
    "ReorderModulesRequest",
    "MaterialCreate",
    "MaterialQuery",
    "MaterialResponse",
    "MaterialUpdate",
    "ReorderMaterialsRequest",
]
