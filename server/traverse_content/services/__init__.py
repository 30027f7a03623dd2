"""Service layer package."""

from .document_service import DocumentService
from .permission_service import PermissionService
from .store_service import CoreStore
from .upload_service import UploadService

__all__ = [
    "CoreStore",
    "DocumentService",
    "PermissionService",
    "UploadService",
]
