"""
Service d'ingestion des images / Image ingestion service.
Chaque fichier est lu independamment et encode en data URL ; un echec est ignore.
Each file is read independently and encoded as a data URL; a failure is dropped.
"""

import asyncio
import base64
import logging

from fastapi import UploadFile

log = logging.getLogger(__name__)


class ImageService:
    """Encodage des pieces jointes / Attachment encoding."""

    @staticmethod
    def to_data_url(content: bytes, content_type: str) -> str:
        encoded = base64.b64encode(content).decode("ascii")
        return f"data:{content_type};base64,{encoded}"

    @staticmethod
    async def read_as_data_url(file: UploadFile) -> str:
        content_type = file.content_type or ""
        if not content_type.startswith("image/"):
            raise ValueError(f"{file.filename}: unsupported content type {content_type!r}")
        content = await file.read()
        return ImageService.to_data_url(content, content_type)

    @staticmethod
    async def ingest(files: list[UploadFile]) -> list[str]:
        """Lire tous les fichiers en parallele / Read every file concurrently.

        L'ordre du resultat n'est pas garanti / Result order is not guaranteed.
        """
        results = await asyncio.gather(
            *(ImageService.read_as_data_url(file) for file in files),
            return_exceptions=True,
        )
        images = []
        for file, result in zip(files, results):
            if isinstance(result, Exception):
                log.warning("Image %s skipped: %s", file.filename, result)
                continue
            images.append(result)
        return images
