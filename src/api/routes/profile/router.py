"""Endpoints do perfil de contato.

Toda escrita passa pelo ProfileService (schema guard + persistência).
Rejeições retornam 422 com os motivos por campo; o perfil não muda.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict

from ai.utils.card_extraction import map_extracted_fields
from api.routes.dependencies import get_profile_service
from app.domain.validators import ImageFile
from app.services.profile_service import ProfileService, SubmitResult
from app.services.sharing import (
    QR_MEDIA_TYPE,
    VCARD_MEDIA_TYPE,
    build_mailto_url,
    build_qr_code,
    build_qr_svg,
    build_sms_url,
    build_vcard,
)

logger = logging.getLogger(__name__)

router = APIRouter()

Service = Annotated[ProfileService, Depends(get_profile_service)]


class ScannedCardPayload(BaseModel):
    """Campos confirmados de um cartão escaneado."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    title: str = ""
    company: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    address: str = ""


class TagPayload(BaseModel):
    tag: str


def _submit_response(result: SubmitResult) -> JSONResponse:
    if result.accepted:
        return JSONResponse(content={"accepted": True, "record": result.record.to_storage_dict()})
    return JSONResponse(
        content={"accepted": False, "reasons": result.reasons},
        status_code=422,
    )


@router.get("")
async def get_profile(service: Service) -> dict[str, Any]:
    return service.current.to_storage_dict()


@router.put("")
async def put_profile(
    service: Service,
    candidate: Annotated[Any, Body()] = None,
) -> JSONResponse:
    """Substitui o perfil inteiro (tudo-ou-nada)."""
    return _submit_response(await service.submit(candidate))


@router.post("/scan")
async def merge_scanned_card(service: Service, payload: ScannedCardPayload) -> JSONResponse:
    """Aplica campos não-vazios de um cartão escaneado."""
    extracted = map_extracted_fields(payload.model_dump())
    return _submit_response(await service.merge_scanned(extracted))


@router.post("/tags")
async def add_tag(service: Service, payload: TagPayload) -> JSONResponse:
    return _submit_response(await service.add_tag(payload.tag))


@router.delete("/tags/{tag}")
async def remove_tag(service: Service, tag: str) -> JSONResponse:
    return _submit_response(await service.remove_tag(tag))


@router.put("/images/{field}")
async def upload_image(
    service: Service,
    field: str,
    request: Request,
    filename: str = "upload",
) -> JSONResponse:
    """Recebe a imagem como corpo bruto (Content-Type jpeg/png)."""
    data = await request.body()
    file = ImageFile.from_bytes(
        name=filename,
        content_type=request.headers.get("content-type", ""),
        data=data,
    )
    return _submit_response(await service.set_image(field, file))


@router.delete("/images/{field}")
async def delete_image(service: Service, field: str) -> JSONResponse:
    return _submit_response(await service.set_image(field, None))


@router.get("/vcard")
async def get_vcard(service: Service) -> Response:
    return Response(
        content=build_vcard(service.current),
        media_type=VCARD_MEDIA_TYPE,
        headers={"Content-Disposition": 'attachment; filename="contact.vcf"'},
    )


@router.get("/qr")
async def get_qr_code(service: Service) -> Response:
    """QR code do vCard atual em SVG."""
    return Response(content=build_qr_svg(service.current), media_type=QR_MEDIA_TYPE)


@router.get("/share")
async def get_share_links(service: Service) -> dict[str, str]:
    record = service.current
    return {
        "mailto": build_mailto_url(record),
        "sms": build_sms_url(record),
        "vcard": build_vcard(record),
        "qr": build_qr_code(record),
    }
