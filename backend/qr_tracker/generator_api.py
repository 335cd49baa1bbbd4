import base64
import io
import logging
from urllib.parse import quote

import qrcode
from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from qr_tracker import app_config
from qr_tracker.net_utils import get_local_ip
from qr_tracker.page_render import render_qr_page

router = APIRouter()

logger = logging.getLogger("qr_tracker.generator")

# encodeURIComponent leaves these unescaped on top of quote()'s own safe set
URI_COMPONENT_SAFE = "!~*'()"


def encode_component(value: str) -> str:
    return quote(value, safe=URI_COMPONENT_SAFE)


def base_url(request: Request) -> str:
    if app_config.is_production():
        host = request.headers.get("host", request.url.netloc)
        return f"{request.url.scheme}://{host}"
    return f"http://{get_local_ip()}:{app_config.PORT}"


def build_tracking_url(base: str, campaign: str, redirect: str) -> str:
    return (
        f"{base}/scan?campaign={encode_component(campaign)}"
        f"&redirect={encode_component(redirect)}"
    )


def make_qr_data_url(data: str) -> str:
    img = qrcode.make(data)
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{encoded}"


@router.post("/generate", response_class=HTMLResponse)
def generate(request: Request, campaign: str = Form(""), redirect: str = Form("")):
    tracking_url = build_tracking_url(base_url(request), campaign, redirect)

    try:
        qr_data_url = make_qr_data_url(tracking_url)
    except Exception:
        logger.exception("QR generation failed for %s", tracking_url)
        return HTMLResponse("Failed to generate QR code", status_code=500)

    logger.info("Generated QR for campaign %r -> %s", campaign, tracking_url)
    return HTMLResponse(render_qr_page(campaign, qr_data_url, tracking_url))
