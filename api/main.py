# api/main.py
"""
FastAPI backend for beam_design - exposes the capacity and analysis engine as a REST API.
"""

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from pydantic import BaseModel, Field, field_validator

from beam_design.catalog import DEFAULT_CATALOG, SectionNotFoundError
from beam_design.checks import DesignCapacity, compute_capacity
from beam_design.config import CONFIG
from beam_design.design import DesignInputs, clamp_members, run_design
from beam_design.loads import LoadSet, clamp_span
from beam_design.report import DeflectionLimit, DeflectionLimits


app = FastAPI(
    title="Beam Design API",
    description="Simply supported beam analysis and section capacity",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class LimitParams(BaseModel):
    """Deflection limit for one category."""
    span_ratio: Optional[float] = Field(None, description="Span divisor, e.g. 240 for L/240")
    max_limit: Optional[float] = Field(None, description="Absolute limit (mm)")


class DeflectionLimitParams(BaseModel):
    """Deflection limits; omitted categories use the defaults."""
    initial: Optional[LimitParams] = None
    short: Optional[LimitParams] = None
    long: Optional[LimitParams] = None

    def to_limits(self) -> DeflectionLimits:
        defaults = DeflectionLimits()

        def pick(params: Optional[LimitParams], default: DeflectionLimit) -> DeflectionLimit:
            if params is None:
                return default
            return DeflectionLimit(span_ratio=params.span_ratio, max_limit=params.max_limit)

        return DeflectionLimits(
            initial=pick(self.initial, defaults.initial),
            short=pick(self.short, defaults.short),
            long=pick(self.long, defaults.long),
        )


class CapacityParams(BaseModel):
    """Section selection."""
    designation: str = Field(..., description="Catalog designation, e.g. 250UB31.4")
    members: int = Field(1, description="Number of parallel members")

    @field_validator("members", mode="before")
    @classmethod
    def _clamp_members(cls, v):
        return clamp_members(v)


class AnalyzeParams(BaseModel):
    """
    General inputs, section and loads.

    Load collections are left untyped: the engine normalises malformed
    collections and entries instead of rejecting the request.
    """
    span: float = Field(CONFIG.default_span, description="Span (m)")
    members: int = Field(1, description="Number of parallel members")
    usage: str = Field(CONFIG.default_usage, description="Usage: Normal, No Traffic, Storage")
    ws: Optional[float] = Field(None, description="Short-term factor (default from usage)")
    wl: Optional[float] = Field(None, description="Long-term factor (default from usage)")
    j2: Optional[float] = Field(None, description="Creep factor (ignored for steel)")
    designation: Optional[str] = Field(None, description="Catalog designation")
    udl_loads: Any = Field(default_factory=list)
    point_loads: Any = Field(default_factory=list)
    moments: Any = Field(default_factory=list)
    full_udl: Any = None
    deflection_limits: Optional[DeflectionLimitParams] = None

    @field_validator("span", mode="before")
    @classmethod
    def _clamp_span(cls, v):
        return clamp_span(v)

    @field_validator("members", mode="before")
    @classmethod
    def _clamp_members(cls, v):
        return clamp_members(v)


class CapacityData(BaseModel):
    """Design capacity."""
    phi_m: float
    phi_v: float
    moment_details: str
    shear_details: str


class AnalysisData(BaseModel):
    """Governing design actions and deflections."""
    max_initial_deflection: float
    max_short_deflection: float
    max_long_deflection: float
    max_moment: float
    max_shear: float
    controlling_moment_case: Optional[str]
    controlling_shear_case: Optional[str]
    self_weight: float
    combination_actions: List[Dict[str, Any]]


class AnalyzeResult(BaseModel):
    """Complete design result; analysis and checks are null until a section is selected."""
    span: float
    ws: float
    wl: float
    section: Optional[Dict[str, Any]] = None
    capacity: CapacityData
    analysis: Optional[AnalysisData] = None
    checks: Optional[Dict[str, Any]] = None


def _capacity_data(capacity: DesignCapacity) -> CapacityData:
    return CapacityData(**asdict(capacity))


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "Beam Design API"}


@app.get("/api/sections")
async def list_sections(family: Optional[str] = None):
    """Catalog designations, optionally filtered by series (UB, UC, PFC) or timber grade."""
    return {"family": family, "designations": DEFAULT_CATALOG.designations(family)}


@app.post("/api/capacity", response_model=CapacityData)
async def section_capacity(params: CapacityParams):
    """Design moment and shear capacity of a (built-up) section."""
    try:
        section = DEFAULT_CATALOG.lookup(params.designation, params.members)
    except SectionNotFoundError:
        raise HTTPException(status_code=404, detail=f"Unknown section: {params.designation}")
    return _capacity_data(compute_capacity(section))


@app.post("/api/analyze", response_model=AnalyzeResult)
async def analyze_beam(params: AnalyzeParams):
    """Run a full design pass: capacity, analysis and checks."""
    loads = LoadSet.from_raw(
        udls=params.udl_loads,
        point_loads=params.point_loads,
        moments=params.moments,
        tributary=params.full_udl,
        span=params.span,
    )
    limits = params.deflection_limits.to_limits() if params.deflection_limits else DeflectionLimits()
    inputs = DesignInputs(
        span=params.span,
        members=params.members,
        usage=params.usage,
        ws=params.ws,
        wl=params.wl,
        j2=params.j2,
        designation=params.designation,
        loads=loads,
        limits=limits,
    )
    outcome = run_design(inputs)
    logger.info("Analyze {} x{} over {} m", params.designation, params.members, params.span)

    analysis = None
    if outcome.analysis is not None:
        analysis = AnalysisData(**asdict(outcome.analysis))

    return AnalyzeResult(
        span=outcome.span,
        ws=outcome.ws,
        wl=outcome.wl,
        section=None if outcome.section is None else asdict(outcome.section),
        capacity=_capacity_data(outcome.capacity),
        analysis=analysis,
        checks=outcome.checks,
    )


if __name__ == "__main__":
    import uvicorn
    from beam_design.logging import configure_logging

    configure_logging()
    uvicorn.run(app, host="0.0.0.0", port=8000)
