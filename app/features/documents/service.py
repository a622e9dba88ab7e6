# Documents Feature - Service

from typing import List
from bson import ObjectId
from bson.errors import InvalidId
from app.features.documents.models import MedicalDocument
from app.features.documents.schemas import DocumentCreate, DocumentUpdate, DocumentResponse
from app.core.logging import logger
from app.shared.exceptions import NotFoundException


class DocumentService:
    """Service class for document metadata operations."""
    
    @staticmethod
    def document_to_response(document: MedicalDocument) -> DocumentResponse:
        """Convert MedicalDocument to response schema."""
        return DocumentResponse(
            id=str(document.id),
            type=document.type,
            title=document.title,
            description=document.description,
            file_path=document.file_path,
            file_type=document.file_type,
            file_size=document.file_size,
            date=document.date,
            doctor_id=document.doctor_id,
            appointment_id=document.appointment_id,
            tags=document.tags,
            created_at=document.created_at,
            updated_at=document.updated_at,
        )
    
    @staticmethod
    async def list_documents() -> List[DocumentResponse]:
        """Get all documents, newest first."""
        documents = await MedicalDocument.find_all().sort(-MedicalDocument.date).to_list()
        return [DocumentService.document_to_response(d) for d in documents]
    
    @staticmethod
    async def get_document(document_id: str) -> MedicalDocument:
        """Get a document by ID, or raise NotFoundException."""
        try:
            document = await MedicalDocument.get(ObjectId(document_id))
        except InvalidId:
            raise NotFoundException("Document not found")
        
        if not document:
            raise NotFoundException("Document not found")
        
        return document
    
    @staticmethod
    async def create_document(document_data: DocumentCreate) -> DocumentResponse:
        """Register a new document."""
        document = MedicalDocument(**document_data.model_dump())
        await document.insert()
        
        logger.info(f"Created document {document.id} ('{document.title}', {document.type})")
        
        return DocumentService.document_to_response(document)
    
    @staticmethod
    async def update_document(document_id: str, update_data: DocumentUpdate) -> DocumentResponse:
        """Apply a partial update to a document."""
        document = await DocumentService.get_document(document_id)
        
        for field, value in update_data.model_dump(exclude_unset=True).items():
            setattr(document, field, value)
        document.update_timestamp()
        await document.save()
        
        logger.info(f"Updated document {document_id}")
        
        return DocumentService.document_to_response(document)
    
    @staticmethod
    async def delete_document(document_id: str) -> bool:
        """Delete a document's metadata."""
        document = await DocumentService.get_document(document_id)
        await document.delete()
        
        logger.info(f"Deleted document {document_id}")
        
        return True
