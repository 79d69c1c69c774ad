"""
Document Management Domain Models
"""
from typing import Optional

from pydantic import BaseModel, Field

from erp_console.domain.common import WireModel


class Folder(WireModel):
    id: str
    name: str
    parent_id: Optional[str] = None
    path: Optional[str] = None
    status: Optional[str] = None


class FolderCreate(BaseModel):
    name: str = Field(..., min_length=1)
    parent_id: Optional[str] = None
    description: Optional[str] = None


class Document(WireModel):
    id: str
    document_number: Optional[str] = None
    title: str
    status: Optional[str] = None
    version: int = 1
    file_name: Optional[str] = None


class DocumentCreate(BaseModel):
    """Document metadata; the file itself is stored by the backend"""

    title: str = Field(..., min_length=1)
    file_name: str = Field(..., min_length=1)
    file_path: str = ""
    file_size: int = Field(0, ge=0)
    mime_type: str = "application/octet-stream"
    checksum: str = ""
    folder_id: Optional[str] = None
    description: Optional[str] = None
