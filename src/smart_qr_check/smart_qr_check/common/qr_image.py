from __future__ import annotations

from io import BytesIO

import qrcode


def render_qr_png(token: str) -> BytesIO:
    """Render a session/event QR token as a PNG kept in memory (ready for send_file)."""
    img = qrcode.make(token)

    buf = BytesIO()
    img.save(buf)
    buf.seek(0)
    return buf
