"""
FastAPI Web Application - Product Description Writer
====================================================

Single-page UI: fill in the product, generate, read the formatted result,
copy or share it. A small JSON API exposes the same two operations.

Each browser gets its own DescriptionSession, keyed by a session cookie.
"""

import html
import logging
import threading
import uuid
from collections import OrderedDict
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Form, HTTPException, Request, Response
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field

from product_writer.application import DescriptionService, DescriptionSession, GenerationState
from product_writer.domain import (
    DescriptionError,
    DisplayBlock,
    EmptyResponseError,
    Heading,
    MalformedResponseError,
    MissingCredentialError,
    ProductDetails,
    TransportError,
    ValidationError,
    format_description,
)
from product_writer.infrastructure.config import get_settings
from product_writer.infrastructure.llm import GeminiClient

logger = logging.getLogger(__name__)

# ── Globals ────────────────────────────────────────────────────────
service: Optional[DescriptionService] = None
sessions: "OrderedDict[str, DescriptionSession]" = OrderedDict()

SESSION_COOKIE = "session_id"
MAX_SESSIONS = 1000
_sessions_lock = threading.Lock()

BUSY_MESSAGE = "A description is already being generated. Please wait."

ERROR_STATUS = {
    ValidationError: 422,
    MissingCredentialError: 503,
    TransportError: 502,
    MalformedResponseError: 502,
    EmptyResponseError: 502,
}


def build_service() -> Optional[DescriptionService]:
    """Create the shared service; None when no API key is configured."""
    settings = get_settings()
    for issue in settings.validate():
        logger.warning(issue)

    try:
        client = GeminiClient(settings.gemini)
    except MissingCredentialError:
        return None
    return DescriptionService(client)


# ── Lifespan ───────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    global service
    service = build_service()
    sessions.clear()
    logger.info(f"Description writer ready (configured={service is not None})")
    yield


app = FastAPI(
    title="Product Description Writer",
    description="AI product descriptions powered by Google Gemini",
    lifespan=lifespan,
)


# ══════════════════════════════════════════════════════════════════
#  API SCHEMAS
# ══════════════════════════════════════════════════════════════════

class ProductDetailsIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    features: str = ""
    benefits: str = ""
    target_audience: str = Field("", alias="targetAudience")

    def to_domain(self) -> ProductDetails:
        return ProductDetails(
            name=self.name,
            features=self.features,
            benefits=self.benefits,
            target_audience=self.target_audience,
        )


class BlockOut(BaseModel):
    kind: str
    text: str
    lines: Optional[list[str]] = None
    emphasized: bool = False

    @classmethod
    def from_block(cls, block: DisplayBlock) -> "BlockOut":
        if isinstance(block, Heading):
            return cls(kind=block.kind, text=block.text)
        return cls(
            kind=block.kind,
            text=block.text,
            lines=list(block.lines),
            emphasized=block.emphasized,
        )


class DescriptionOut(BaseModel):
    text: str
    blocks: list[BlockOut]


class FormatIn(BaseModel):
    text: str = ""


class FormatOut(BaseModel):
    blocks: list[BlockOut]


# ══════════════════════════════════════════════════════════════════
#  PAGE CSS
# ══════════════════════════════════════════════════════════════════

PAGE_CSS = """
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700;800&display=swap');

    :root {
        --bg: #f5f3ff;
        --card: #ffffff;
        --border: #e5e7eb;
        --text: #1f2937;
        --text-muted: #6b7280;
        --accent: #7c3aed;
        --accent-soft: #f5f3ff;
        --gradient: linear-gradient(135deg, #f5f3ff 0%, #eff6ff 100%);
    }

    * { margin: 0; padding: 0; box-sizing: border-box; }

    body {
        font-family: 'Inter', -apple-system, BlinkMacSystemFont, sans-serif;
        background: var(--gradient);
        min-height: 100vh;
        color: var(--text);
        padding: 24px;
    }

    .container { max-width: 896px; margin: 0 auto; }

    .title {
        display: flex; justify-content: center; align-items: center; gap: 8px;
        margin-bottom: 32px;
    }
    .title h1 { font-size: 30px; font-weight: 700; }

    .card {
        background: var(--card);
        border-radius: 12px;
        box-shadow: 0 10px 25px rgba(0,0,0,0.08);
        padding: 24px;
        margin-bottom: 24px;
    }

    .form-group { margin-bottom: 20px; }
    .form-group label { display: block; font-size: 14px; font-weight: 500; color: #374151; margin-bottom: 4px; }

    input[type="text"], textarea {
        width: 100%;
        padding: 8px 16px;
        border: 1px solid #d1d5db;
        border-radius: 8px;
        font-size: 14px;
        font-family: inherit;
    }
    input:focus, textarea:focus {
        outline: none;
        border-color: transparent;
        box-shadow: 0 0 0 2px var(--accent);
    }

    .btn {
        background: var(--accent);
        color: #fff;
        border: none;
        padding: 12px 24px;
        border-radius: 8px;
        font-weight: 600;
        font-size: 14px;
        cursor: pointer;
        width: 100%;
        font-family: inherit;
    }
    .btn:hover { background: #6d28d9; }

    .btn-ghost {
        background: var(--accent-soft);
        color: var(--accent);
        width: auto;
        padding: 8px 16px;
    }
    .btn-ghost:hover { background: #ede9fe; }

    .link-btn { background: none; border: none; color: var(--text-muted); cursor: pointer; font-family: inherit; }
    .link-btn:hover { color: var(--accent); }

    .alert {
        padding: 16px;
        border-left: 4px solid;
        margin-bottom: 16px;
        font-size: 14px;
        white-space: pre-wrap;
    }
    .alert-error { background: #fef2f2; border-color: #ef4444; color: #b91c1c; }
    .alert-info  { background: var(--accent-soft); border-color: var(--accent); color: #5b21b6; }

    .result-header { display: flex; justify-content: space-between; align-items: center; margin-bottom: 24px; }
    .result-header h2 { font-size: 24px; font-weight: 700; }
    .result-body { background: var(--gradient); border-radius: 8px; padding: 24px; }

    .section-heading { font-size: 20px; font-weight: 600; color: var(--text); margin: 16px 0 12px; }
    .section { margin-bottom: 16px; color: #4b5563; }
    .section.emphasized { font-size: 18px; font-weight: 500; color: var(--text); }

    .result-footer {
        display: flex; justify-content: space-between; align-items: center;
        margin-top: 24px; padding-top: 16px; border-top: 1px solid var(--border);
        font-size: 14px; color: var(--text-muted);
    }
    .result-footer .actions { display: flex; gap: 8px; }
"""

COPY_SHARE_JS = """
    function rawDescription() {
        return document.getElementById('raw-description').value;
    }
    async function copyDescription() {
        try {
            await navigator.clipboard.writeText(rawDescription());
            const label = document.getElementById('copy-label');
            label.textContent = 'Copied!';
            setTimeout(() => { label.textContent = 'Copy All'; }, 2000);
        } catch (err) {
            console.error('Failed to copy text:', err);
        }
    }
    function shareDescription() {
        if (!navigator.share) return;
        navigator.share({ title: 'Product Description', text: rawDescription() }).catch(() => {});
    }
"""


# ══════════════════════════════════════════════════════════════════
#  HTML RENDERERS
# ══════════════════════════════════════════════════════════════════

def render_blocks(blocks: list[DisplayBlock]) -> str:
    parts = []
    for block in blocks:
        if isinstance(block, Heading):
            parts.append(f'<h3 class="section-heading">{html.escape(block.text)}</h3>')
            continue
        css = "section emphasized" if block.emphasized else "section"
        body = "<br>".join(html.escape(line) for line in block.lines)
        parts.append(f'<div class="{css}">{body}</div>')
    return "\n".join(parts)


def render_result(state: GenerationState) -> str:
    if not state.description:
        return ""
    generated_on = state.generated_on.strftime("%m/%d/%Y") if state.generated_on else ""
    return f"""
        <div class="card">
            <div class="result-header">
                <h2>Generated Description</h2>
                <button type="button" class="btn btn-ghost" onclick="copyDescription()">
                    <span id="copy-label">Copy All</span>
                </button>
            </div>
            <div class="result-body">
                {render_blocks(state.blocks)}
            </div>
            <div class="result-footer">
                <div>Generated by AI &bull; {generated_on}</div>
                <div class="actions">
                    <button type="button" class="link-btn" onclick="shareDescription()">Share</button>
                    <button type="button" class="link-btn" onclick="copyDescription()">Copy</button>
                </div>
            </div>
            <textarea id="raw-description" hidden>{html.escape(state.description)}</textarea>
        </div>"""


def render_page(state: GenerationState, message: str = "") -> str:
    err_html = f'<div class="alert alert-error">{html.escape(state.error)}</div>' if state.error else ""
    msg_html = f'<div class="alert alert-info">{html.escape(message)}</div>' if message else ""
    d = state.details

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>AI Product Description Writer</title>
    <style>
        {PAGE_CSS}
    </style>
</head>
<body>
    <div class="container">
        {err_html}
        {msg_html}
        <div class="title">
            <h1>AI Product Description Writer</h1>
        </div>

        <div class="card">
            <form method="post" action="/generate">
                <div class="form-group">
                    <label>Product Name</label>
                    <input type="text" name="name" value="{html.escape(d.name)}" placeholder="e.g., Ultra Comfort Pro Chair">
                </div>
                <div class="form-group">
                    <label>Key Features (comma-separated)</label>
                    <textarea name="features" rows="3" placeholder="e.g., Ergonomic design, Memory foam padding, Adjustable height">{html.escape(d.features)}</textarea>
                </div>
                <div class="form-group">
                    <label>Benefits (comma-separated)</label>
                    <textarea name="benefits" rows="3" placeholder="e.g., Reduces back pain, Improves posture, Increases productivity">{html.escape(d.benefits)}</textarea>
                </div>
                <div class="form-group">
                    <label>Target Audience</label>
                    <input type="text" name="target_audience" value="{html.escape(d.target_audience)}" placeholder="e.g., office professionals seeking comfort">
                </div>
                <button type="submit" class="btn">Generate AI Description</button>
            </form>
        </div>
        {render_result(state)}
    </div>
    <script>{COPY_SHARE_JS}</script>
</body>
</html>"""


# ── Helpers ────────────────────────────────────────────────────────

def _session_for(request: Request) -> tuple[str, DescriptionSession]:
    """Session of the calling browser, created on its first visit."""
    session_id = request.cookies.get(SESSION_COOKIE)
    with _sessions_lock:
        current = sessions.get(session_id) if session_id else None
        if current is None:
            session_id = uuid.uuid4().hex
            current = DescriptionSession(service)
            sessions[session_id] = current
            # Oldest idle session goes first
            if len(sessions) > MAX_SESSIONS:
                sessions.popitem(last=False)
        else:
            sessions.move_to_end(session_id)
    return session_id, current


def _set_session_cookie(response: Response, session_id: str) -> None:
    response.set_cookie(key=SESSION_COOKIE, value=session_id, httponly=True, samesite="lax")


def _page(session_id: str, state: GenerationState, message: str = "") -> HTMLResponse:
    response = HTMLResponse(render_page(state, message))
    _set_session_cookie(response, session_id)
    return response


def _status_for(error: DescriptionError) -> int:
    for error_type, status in ERROR_STATUS.items():
        if isinstance(error, error_type):
            return status
    return 500


# ── Page routes ────────────────────────────────────────────────────

@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    session_id, current = _session_for(request)
    return _page(session_id, current.state)


@app.post("/generate", response_class=HTMLResponse)
def generate(
    request: Request,
    name: str = Form(""),
    features: str = Form(""),
    benefits: str = Form(""),
    target_audience: str = Form(""),
):
    session_id, current = _session_for(request)
    details = ProductDetails(
        name=name, features=features, benefits=benefits, target_audience=target_audience
    )
    result = current.generate(details)
    if result is None:
        return _page(session_id, current.state, message=BUSY_MESSAGE)
    return _page(session_id, current.state)


# ── JSON API ───────────────────────────────────────────────────────

@app.get("/api/health")
async def api_health():
    return {"status": "ok", "configured": service is not None}


@app.post("/api/descriptions", response_model=DescriptionOut)
def api_create_description(payload: ProductDetailsIn, request: Request, response: Response):
    session_id, current = _session_for(request)
    _set_session_cookie(response, session_id)
    result = current.generate(payload.to_domain())

    if result is None:
        raise HTTPException(status_code=409, detail=BUSY_MESSAGE)
    if not result.ok:
        raise HTTPException(status_code=_status_for(result.error), detail=str(result.error))

    return DescriptionOut(
        text=result.text,
        blocks=[BlockOut.from_block(b) for b in format_description(result.text)],
    )


@app.post("/api/format", response_model=FormatOut)
async def api_format(payload: FormatIn):
    return FormatOut(blocks=[BlockOut.from_block(b) for b in format_description(payload.text)])
