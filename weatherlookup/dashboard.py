"""Weather lookup dashboard: FastAPI backend exposing the live lookup state."""

import os
from dataclasses import asdict
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse
from pydantic import BaseModel, Field, model_validator

from weatherlookup.config.defaults import DEFAULT_CONFIG_PATH
from weatherlookup.config.loader import load_config
from weatherlookup.lookup.orchestrator import WeatherLookup
from weatherlookup.models.common import ErrorKind
from weatherlookup.models.lookup import LookupStatus
from weatherlookup.reporting.formatters import (
    display_daily,
    display_hourly,
    lookup_to_dict,
)

CONFIG_PATH = os.environ.get("WEATHERLOOKUP_CONFIG", DEFAULT_CONFIG_PATH)
DASHBOARD_HTML = Path(__file__).parent / "static" / "dashboard.html"


class LookupRequest(BaseModel):
    model_config = {"extra": "forbid"}

    city: str | None = None
    lat: float | None = Field(default=None, ge=-90.0, le=90.0)
    lon: float | None = Field(default=None, ge=-180.0, le=180.0)

    @model_validator(mode="after")
    def _city_or_coords(self):
        if self.city is None and (self.lat is None or self.lon is None):
            raise ValueError("provide either city or both lat and lon")
        return self


def create_app(lookup: WeatherLookup | None = None) -> FastAPI:
    if lookup is None:
        lookup = WeatherLookup.from_config(load_config(CONFIG_PATH))

    app = FastAPI(title="Weather Lookup Dashboard", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── State endpoints ─────────────────────────────────────────

    @app.get("/api/state")
    def get_state():
        """Live lookup state, capped and localized for display."""
        snapshot = lookup.state.snapshot()
        data = lookup_to_dict(snapshot)
        data["hourly"] = [asdict(h) for h in display_hourly(snapshot.hourly)]
        data["daily"] = [asdict(d) for d in display_daily(snapshot, lookup.labels)]
        data["is_loading"] = lookup.state.is_loading
        return data

    @app.post("/api/lookup")
    def post_lookup(req: LookupRequest):
        """Run a lookup; returns 409 while another is loading."""
        if lookup.state.is_loading:
            raise HTTPException(status_code=409, detail="lookup already in progress")
        if req.city is not None:
            result = lookup.lookup_by_name(req.city)
        else:
            result = lookup.lookup_by_location(req.lat, req.lon)
        data = lookup_to_dict(result)
        if result.status == LookupStatus.ERROR:
            code = 422 if result.error_kind == ErrorKind.EMPTY_QUERY else 502
            raise HTTPException(status_code=code, detail=data)
        return data

    # ── Serve dashboard ─────────────────────────────────────────

    @app.get("/")
    def serve_dashboard():
        if DASHBOARD_HTML.exists():
            return FileResponse(DASHBOARD_HTML, media_type="text/html")
        return HTMLResponse("<h1>Dashboard not found</h1>", status_code=404)

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(create_app(), host="0.0.0.0", port=8777)
