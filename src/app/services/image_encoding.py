"""Codificação de imagens enviadas para data URLs."""

from __future__ import annotations

import base64

from app.domain.validators import ImageFile, validate_image_file


class ImageRejectedError(ValueError):
    """Arquivo reprovado na validação de imagem (mensagem exibível)."""


def encode_image_file(file: ImageFile) -> str:
    """Valida o arquivo e retorna `data:<mime>;base64,<conteúdo>`.

    Raises:
        ImageRejectedError: Com o primeiro motivo de falha da validação.
    """
    validation = validate_image_file(file)
    if not validation.ok:
        raise ImageRejectedError(validation.reason)
    encoded = base64.b64encode(file.data).decode("ascii")
    return f"data:{file.media_type};base64,{encoded}"
