"""QR badge payloads for check-in.

A badge encodes ``USER:<id>``; scanning hardware is not part of this module,
callers hand over the decoded text.
"""

from __future__ import annotations

import io
from typing import Optional

import qrcode

QR_PREFIX = "USER:"


def qr_payload(user_id: str) -> str:
    return f"{QR_PREFIX}{user_id}"


def parse_qr_payload(text: Optional[str]) -> Optional[str]:
    value = (text or "").strip()
    if not value.upper().startswith(QR_PREFIX):
        return None
    user_id = value[len(QR_PREFIX):].strip()
    return user_id or None


def render_qr_png(payload: str) -> bytes:
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
