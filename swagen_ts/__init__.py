"""TypeScript fragment builders for generated API clients."""

from .doc_comments import build_operation_doc_comments
from .errors import (
    InvalidOptionError,
    SwagenError,
    TypeResolutionError,
    UnrecognizedPrimitiveKind,
    UnresolvableTypeKind,
)
from .header import build_header
from .models import (
    ComplexType,
    Definition,
    EnumType,
    Metadata,
    Operation,
    Parameter,
    PrimitiveType,
    Profile,
    Property,
    ResponseSpec,
)
from .signature import (
    DEFAULT_VOID_TYPE,
    VOID_TYPES,
    MethodSignatureOptions,
    ReturnTypeOptions,
    get_method_signature,
    get_return_type,
)
from .types import get_data_type

__all__ = [
    "DEFAULT_VOID_TYPE",
    "VOID_TYPES",
    "ComplexType",
    "Definition",
    "EnumType",
    "InvalidOptionError",
    "Metadata",
    "MethodSignatureOptions",
    "Operation",
    "Parameter",
    "PrimitiveType",
    "Profile",
    "Property",
    "ResponseSpec",
    "ReturnTypeOptions",
    "SwagenError",
    "TypeResolutionError",
    "UnrecognizedPrimitiveKind",
    "UnresolvableTypeKind",
    "build_header",
    "build_operation_doc_comments",
    "get_data_type",
    "get_method_signature",
    "get_return_type",
]
