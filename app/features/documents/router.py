# Documents Feature - Router

from typing import List
from fastapi import APIRouter, status
from app.features.documents.schemas import DocumentCreate, DocumentUpdate, DocumentResponse
from app.features.documents.service import DocumentService
from app.shared.schemas import MessageResponse


router = APIRouter(prefix="/documents", tags=["Documents"])


@router.get("", response_model=List[DocumentResponse])
async def list_documents():
    """List all documents, most recent first."""
    return await DocumentService.list_documents()


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def create_document(document_data: DocumentCreate):
    """
    Register a document.
    
    - **type**: Category tag
    - **title**: Display title
    - **file_path** / **file_type**: Where the file is stored and its format
    - **doctor_id** / **appointment_id**: Optional links
    """
    return await DocumentService.create_document(document_data)


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(document_id: str):
    """Get a single document."""
    document = await DocumentService.get_document(document_id)
    return DocumentService.document_to_response(document)


@router.put("/{document_id}", response_model=DocumentResponse)
async def update_document(document_id: str, update_data: DocumentUpdate):
    """Update a document. Fields left out of the body keep their values."""
    return await DocumentService.update_document(document_id, update_data)


@router.delete("/{document_id}", response_model=MessageResponse)
async def delete_document(document_id: str):
    """Delete a document's metadata."""
    await DocumentService.delete_document(document_id)
    return MessageResponse(message="Document deleted successfully")
