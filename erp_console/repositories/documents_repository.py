"""
Documents Repository - folders and document metadata
"""
from typing import Any, Dict, List, Optional

from erp_console.domain import Document, Folder
from erp_console.repositories.module import ModuleRepository


class DocumentsRepository(ModuleRepository):
    module = "documents"

    async def list_folders(self, parent_id: Optional[str] = None) -> List[Folder]:
        """Folders directly under parent_id (top level when None)"""
        filters = {'parent_id': parent_id} if parent_id else {}
        return await self.resource("folders").list(**filters)

    async def create_folder(self, name: str, parent_id: Optional[str] = None) -> Folder:
        return await self.resource("folders").create({'name': name, 'parent_id': parent_id})

    async def list_documents(self, folder_id: Optional[str] = None) -> List[Document]:
        filters = {'folder_id': folder_id} if folder_id else {}
        return await self.resource("documents").list(**filters)

    async def create_document(self, data: Dict[str, Any]) -> Document:
        data = dict(data)
        if not data.get('file_path') and data.get('file_name'):
            data['file_path'] = f"/uploads/{data['file_name']}"
        return await self.resource("documents").create(data)

    async def checkout(self, document_id: str, user_id: str) -> Any:
        return await self.resource("documents").perform(document_id, "checkout", {'user_id': user_id})
