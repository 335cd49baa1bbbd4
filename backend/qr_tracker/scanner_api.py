import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from qr_tracker import app_config
from qr_tracker.page_render import render_dashboard
from qr_tracker.scan_history import ScanRecord, ScanStore, get_store

router = APIRouter()

logger = logging.getLogger("qr_tracker.scans")


def client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


@router.get("/scan")
def scan(
    request: Request,
    campaign: Optional[str] = None,
    redirect: Optional[str] = None,
    user_agent: Optional[str] = Header(None),
    store: ScanStore = Depends(get_store),
):
    campaign = campaign or app_config.DEFAULT_CAMPAIGN
    redirect = redirect or app_config.DEFAULT_REDIRECT

    record = store.append(ScanRecord.now(campaign, client_ip(request), user_agent))
    logger.info("Scan logged: %s", record.to_json())

    return RedirectResponse(redirect, status_code=302)


@router.get("/dashboard", response_class=HTMLResponse)
def dashboard(store: ScanStore = Depends(get_store)):
    return HTMLResponse(render_dashboard(store.list_recent()))


@router.get("/api/scans")
def list_scans(store: ScanStore = Depends(get_store)):
    return [r.to_json() for r in store.list_records()]
