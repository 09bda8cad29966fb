"""File endpoints module.

This module provides Flask routes to upload, list and delete the files whose
text feeds the model context. Every change to the stored files flushes the
answer cache.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from flask import Blueprint, jsonify, request
from pydantic import ValidationError as PydanticValidationError

from goncalinho.src.api.middleware.exceptions import ServiceError, ValidationError
from goncalinho.src.data_classes import FileMetadata, FileRecord
from goncalinho.src.services import AnswerCache, DocumentStore, TextExtractor

logger = logging.getLogger(__name__)


def parse_metadata(raw_metadata: Optional[str]) -> FileMetadata:
    """Parse the metadata form field sent with an upload.

    Args:
        raw_metadata: JSON string from the form, possibly missing

    Returns:
        FileMetadata: Parsed metadata, or defaults if the JSON is malformed
    """
    try:
        return FileMetadata.model_validate_json(raw_metadata or "{}")
    except PydanticValidationError as e:
        logger.warning(f"Invalid metadata JSON, using defaults: {e.error_count()} errors")
        return FileMetadata()


def init_file_routes(
    document_store: DocumentStore,
    answer_cache: AnswerCache,
    text_extractor: TextExtractor,
) -> Blueprint:
    """Initialize file routes with the provided services.

    Args:
        document_store: Store holding the file records.
        answer_cache: Cache flushed whenever the stored files change.
        text_extractor: Extractor turning uploads into text.

    Returns:
        Blueprint: Flask blueprint with configured file routes.
    """
    files_bp = Blueprint("files", __name__)

    @files_bp.route("/api/upload", methods=["POST"])
    def upload_file() -> Any:
        """Store an uploaded file, extract its text and record it.

        Returns:
            JSON with the new record, without its content
        """
        uploaded = request.files.get("file")
        if uploaded is None or not uploaded.filename:
            raise ValidationError("No file uploaded.")

        metadata = parse_metadata(request.form.get("metadata"))
        original_name = uploaded.filename

        try:
            storage_path = document_store.build_upload_path(original_name)
            uploaded.save(storage_path)

            if not text_extractor.is_supported(original_name):
                logger.warning(f"Unsupported file type stored without text: {original_name}")
            extraction = text_extractor.extract(storage_path, original_name)

            record = FileRecord.from_upload(
                name=original_name,
                path=str(storage_path),
                extension=os.path.splitext(original_name)[1],
                content=extraction.text,
                metadata=metadata,
            )
            if not document_store.append(record):
                logger.warning(f"File record {record.id} could not be persisted")
                # No record points to the upload any more
                document_store.delete_upload(str(storage_path))
        except Exception as e:
            logger.error(f"Upload error: {str(e)}")
            raise ServiceError(message="Processing failed", details=str(e))

        # Cached answers may have been built without this file
        answer_cache.flush_all()

        return jsonify({"success": True, "file": record.to_dict(include_content=False)})

    @files_bp.route("/files", methods=["GET"])
    def list_files() -> Any:
        """List the stored files without their content.

        Returns:
            JSON array of records in upload order
        """
        files: List[Dict[str, Any]] = [
            record.to_dict(include_content=False)
            for record in document_store.load_all()
        ]
        return jsonify(files)

    @files_bp.route("/files/<file_id>", methods=["DELETE"])
    def delete_file(file_id: str) -> Any:
        """Delete a stored file and its record.

        Unknown ids are not an error: the result is the same.

        Args:
            file_id: Identifier of the record

        Returns:
            JSON ``{"success": true}``
        """
        if document_store.remove(file_id) is not None:
            answer_cache.flush_all()
        return jsonify({"success": True})

    return files_bp
