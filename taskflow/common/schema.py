# common/schema.py
"""
Shared tooling for drf-spectacular docs on APIView classes.
Usage in views:
    from common.schema import (
        extend_schema, OpenApiTypes,
        MessageSerializer, path_int, q_int, q_str, std_errors,
    )
"""
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import (
    OpenApiParameter, OpenApiResponse, extend_schema, inline_serializer,
)
from rest_framework import serializers

__all__ = [
    "extend_schema", "OpenApiTypes", "MessageSerializer",
    "path_int", "q_int", "q_str", "std_errors",
]

# ---- Reusable error / message schemas
_ErrorSerializer = inline_serializer(
    name="Error",
    fields={"detail": serializers.CharField()},
)

MessageSerializer = inline_serializer(
    name="Message",
    fields={"message": serializers.CharField()},
)

# ---- Param helpers

def path_int(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.PATH, description=description)

def q_int(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.QUERY, required=required, description=description)

def q_str(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.QUERY, required=required, description=description)

# ---- Convenience for common responses

def std_errors(*codes: int, extra: dict | None = None):
    """Standard error response mapping you can merge into responses=..."""
    descriptions = {
        400: "Bad Request",
        401: "Unauthorized",
        403: "Forbidden",
        404: "Not Found",
        500: "Server Error",
    }
    codes = codes or (400, 401, 403, 404)
    errs = {code: OpenApiResponse(_ErrorSerializer, description=descriptions[code]) for code in codes}
    if extra:
        errs.update(extra)
    return errs
