"""Serializadores de compartilhamento do perfil (vCard, QR code, mailto, SMS).

Recebem apenas records aceitos pelo schema guard.
"""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING
from urllib.parse import quote

import qrcode
import qrcode.constants
from qrcode.image.svg import SvgPathImage

if TYPE_CHECKING:
    from app.domain.contact_record import ContactRecord

VCARD_MEDIA_TYPE = "text/vcard"
QR_MEDIA_TYPE = "image/svg+xml"

# Mesmo conjunto preservado por encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def escape_vcard_value(value: str) -> str:
    """Escapa texto de propriedade vCard (\\, ;, , e quebras de linha)."""
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
        .replace("\r", "\\n")
    )


def build_vcard(record: ContactRecord) -> str:
    """Gera vCard 3.0 com linhas CRLF; propriedades vazias são omitidas."""
    fn = escape_vcard_value(record.name)
    lines = ["BEGIN:VCARD", "VERSION:3.0", f"FN:{fn}", f"N:;{fn};;;"]
    optional = (
        ("ORG", record.company),
        ("TITLE", record.title),
        ("EMAIL", record.email),
        ("TEL", record.phone),
        ("URL", record.website),
    )
    for prop, value in optional:
        if value:
            lines.append(f"{prop}:{escape_vcard_value(value)}")
    if record.address:
        lines.append(f"ADR:;;{escape_vcard_value(record.address)};;;;")
    lines.append("END:VCARD")
    return "\r\n".join(lines) + "\r\n"


def _encode(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def build_email_body(record: ContactRecord) -> str:
    return (
        "Aqui estão meus dados de contato:\n\n"
        f"Nome: {record.name}\n"
        f"Cargo: {record.title}\n"
        f"Empresa: {record.company}\n"
        f"E-mail: {record.email}\n"
        f"Telefone: {record.phone}\n"
        f"Website: {record.website}\n"
        f"Endereço: {record.address}\n\n"
        "Atenciosamente,\n"
        f"{record.name}"
    )


def build_mailto_url(record: ContactRecord) -> str:
    """URL mailto: sem destinatário, com assunto e corpo codificados."""
    subject = f"Dados de contato de {record.name}"
    return f"mailto:?subject={_encode(subject)}&body={_encode(build_email_body(record))}"


def build_sms_message(record: ContactRecord) -> str:
    return (
        f"{record.name} - {record.title} na {record.company}. "
        f"E-mail: {record.email}, Tel: {record.phone}"
    )


def build_sms_url(record: ContactRecord) -> str:
    """URL sms: sem destinatário, com corpo codificado."""
    return f"sms:?body={_encode(build_sms_message(record))}"


def build_qr_svg(record: ContactRecord) -> str:
    """Renderiza o vCard do perfil como QR code em SVG.

    Correção de erro nível Q e borda de 2 módulos.
    """
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_Q,
        box_size=10,
        border=2,
    )
    qr.add_data(build_vcard(record))
    qr.make(fit=True)
    img = qr.make_image(image_factory=SvgPathImage)
    return img.to_string(encoding="unicode")


def build_qr_code(record: ContactRecord) -> str:
    """QR code do vCard como data URL (image/svg+xml, base64)."""
    svg = build_qr_svg(record).encode("utf-8")
    return f"data:{QR_MEDIA_TYPE};base64,{base64.b64encode(svg).decode('ascii')}"
