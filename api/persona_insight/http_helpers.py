import logging

from fastapi import HTTPException, UploadFile

from .config import MAX_UPLOAD_BYTES


logger = logging.getLogger(__name__)

TEXT_CONTENT_TYPES = {"text/plain"}


async def read_text_upload(file: UploadFile) -> str:
    content_type = (file.content_type or "").split(";")[0].strip().lower()
    if content_type not in TEXT_CONTENT_TYPES:
        logger.warning("rejected upload content_type=%s", content_type or "<none>")
        raise HTTPException(
            status_code=415,
            detail="Only plain text uploads are supported; convert PDF, image and Word files to text first",
        )

    data = await file.read()
    if not data:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    if len(data) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"Uploaded file exceeds {MAX_UPLOAD_BYTES} bytes")

    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.warning("rejected upload: not valid UTF-8")
        raise HTTPException(status_code=400, detail="Uploaded file must be UTF-8 text")
