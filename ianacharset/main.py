import hashlib
import logging
from typing import List, Optional

from fastapi import FastAPI, UploadFile, File, HTTPException, Query

from .dispatch import AnyCharset, AnyDecodeError, decode_view
from .models import CharsetInfo, DecodeResponse, HealthResponse
from .rules import DEFAULT_CHARSET, MAX_UPLOAD_BYTES

logger = logging.getLogger(__name__)

app = FastAPI(
    title="ianacharset",
    description="Validated decoding of charset-labeled byte payloads",
    version="0.1.0",
)


def charset_info(selector: AnyCharset) -> CharsetInfo:
    return CharsetInfo(
        mib_enum=selector.mib_enum,
        primary_name=selector.primary_name,
        preferred_mime_name=selector.preferred_mime_name,
        mime_text_suitable=selector.is_mime_text_suitable(),
        aliases=[str(alias) for alias in selector.aliases()],
    )


def content_type_charset(content_type: Optional[str]) -> Optional[str]:
    """The ``charset`` parameter of a Content-Type value, if any."""
    if not content_type:
        return None
    for param in content_type.split(";")[1:]:
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset":
            return value.strip().strip('"') or None
    return None


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.get("/charsets", response_model=List[CharsetInfo])
def list_charsets():
    return [charset_info(selector) for selector in AnyCharset]


@app.post("/decode", response_model=DecodeResponse)
async def decode(
    file: UploadFile = File(...),
    charset: Optional[str] = Query(default=None),
):
    label = charset or content_type_charset(file.content_type) or DEFAULT_CHARSET
    try:
        selector = AnyCharset.lookup(label)
    except LookupError:
        logger.info("unknown charset label %r", label)
        raise HTTPException(status_code=422, detail=f"unknown charset: {label}")

    raw = await file.read()
    if len(raw) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="Payload too large")

    try:
        view = decode_view(selector, raw)
    except AnyDecodeError as error:
        logger.info("rejected %d bytes labeled %r: %s", len(raw), label, error)
        raise HTTPException(status_code=422, detail=str(error))

    return {
        "charset": charset_info(selector),
        "text": str(view),
        "length": len(view),
        "sha256": hashlib.sha256(raw).hexdigest(),
    }
