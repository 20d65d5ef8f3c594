"""
Ge'ez HTTP API — Numeral Conversion over JSON
=============================================
FastAPI application exposing the codec to web clients.

Launch:
    python -m geez.server           # Direct
    geez serve --port 8000          # Via CLI

Endpoints:
    GET  /api/glyphs                → Keypad reference data
    GET  /api/encode/{number}       → Integer to Ge'ez
    POST /api/decode                → Ge'ez to integer
    POST /api/validate              → Structural check with message
    GET  /api/myriad/{power}        → Name and value of stacked myriads
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from .decoder import decode
from .encoder import encode
from .errors import GeezError, StructuralError
from .glyphs import KEYPAD, myriad_power_info
from .safe import digit_count
from .validator import validate

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────
#  Configuration
# ─────────────────────────────────────────────────────────────

@dataclass
class ServerConfig:
    """Bind address for the HTTP API."""
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Read GEEZ_HOST / GEEZ_PORT, falling back to the defaults."""
        host = os.environ.get("GEEZ_HOST", cls.host)
        port = os.environ.get("GEEZ_PORT", "")
        try:
            port_value = int(port) if port else cls.port
        except ValueError:
            raise ValueError(f"GEEZ_PORT must be an integer, got {port!r}") from None
        return cls(host=host, port=port_value)


# ─────────────────────────────────────────────────────────────
#  App Setup
# ─────────────────────────────────────────────────────────────

app = FastAPI(title="Ge'ez Numerals", version="1.0.0")


# ─────────────────────────────────────────────────────────────
#  Request / Response Models
# ─────────────────────────────────────────────────────────────

class NumeralRequest(BaseModel):
    numeral: str


class EncodeResponse(BaseModel):
    number: int
    numeral: str


class DecodeResponse(BaseModel):
    numeral: str
    number: int


class ValidateResponse(BaseModel):
    valid: bool
    message: Optional[str] = None
    kind: Optional[str] = None
    position: Optional[int] = None


def _error_detail(error: GeezError) -> dict:
    detail = {"kind": error.kind.value, "message": error.message}
    if isinstance(error, StructuralError):
        detail["position"] = error.position
        detail["glyph"] = error.glyph
    return detail


def _too_large(digits: int) -> Optional[dict]:
    """Error detail when a JSON integer of ``digits`` digits cannot be written."""
    limit = sys.get_int_max_str_digits()
    if limit and digits > limit:
        return {
            "kind": "number_too_large",
            "message": f"Value has {digits:,} digits; the API returns at most {limit:,}",
        }
    return None


# ─────────────────────────────────────────────────────────────
#  Routes — REST API
# ─────────────────────────────────────────────────────────────

@app.get("/api/glyphs")
async def api_glyphs():
    """Return the keypad rows: ones, tens and multipliers."""
    return {
        row: [{"symbol": g.symbol, "value": g.value, "label": g.label} for g in glyphs]
        for row, glyphs in KEYPAD.items()
    }


@app.get("/api/encode/{number}", response_model=EncodeResponse)
async def api_encode(number: int):
    """Convert an integer to Ge'ez numerals."""
    detail = _too_large(digit_count(number))
    if detail:
        raise HTTPException(status_code=400, detail=detail)
    try:
        return EncodeResponse(number=number, numeral=encode(number))
    except GeezError as e:
        logger.info("Rejected encode(%s): %s", number, e.kind.name)
        raise HTTPException(status_code=400, detail=_error_detail(e))


@app.post("/api/decode", response_model=DecodeResponse)
async def api_decode(req: NumeralRequest):
    """Convert Ge'ez numerals to an integer."""
    try:
        number = decode(req.numeral)
    except GeezError as e:
        logger.info("Rejected decode(%r): %s", req.numeral, e.kind.name)
        raise HTTPException(status_code=400, detail=_error_detail(e))
    detail = _too_large(digit_count(number))
    if detail:
        logger.info("Rejected decode(%r): %s", req.numeral, detail["kind"])
        raise HTTPException(status_code=400, detail=detail)
    return DecodeResponse(numeral=req.numeral, number=number)


@app.post("/api/validate", response_model=ValidateResponse)
async def api_validate(req: NumeralRequest):
    """Check a numeral without converting it."""
    error = validate(req.numeral.strip())
    if error is None:
        return ValidateResponse(valid=True)
    return ValidateResponse(
        valid=False,
        message=error.message,
        kind=error.kind.value,
        position=getattr(error, "position", None),
    )


@app.get("/api/myriad/{power}")
async def api_myriad(power: int):
    """Describe ``power`` stacked myriads."""
    # 10000**power has 4*power + 1 digits
    detail = _too_large(4 * power + 1)
    if detail:
        raise HTTPException(status_code=400, detail=detail)
    try:
        info = myriad_power_info(power)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"power": info.power, "value": info.value, "name": info.name, "numeral": encode(info.value)}


# ─────────────────────────────────────────────────────────────
#  Startup
# ─────────────────────────────────────────────────────────────

def run_server(config: ServerConfig | None = None):
    """Launch the HTTP API with uvicorn."""
    import uvicorn

    config = config or ServerConfig.from_env()

    print(f"\n፩ ─── Ge'ez Numerals API ───")
    print(f"  http://{config.host}:{config.port}")
    print(f"  Press Ctrl+C to stop\n")

    uvicorn.run(app, host=config.host, port=config.port, log_level="warning")


if __name__ == "__main__":
    run_server()
