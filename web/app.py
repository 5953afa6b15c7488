"""Local-first FastAPI shell for sat rarity classification."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from rarity_core.engine import CoordinateError, derive_rarity, validate_coordinate
from rarity_core.models import InvalidRarity, InvalidRarityCode, PositionalCoordinate, Rarity
from rarity_core.schedule import EmissionSchedule, ScheduleError

logger = logging.getLogger(__name__)

app = FastAPI(title="Sat Rarity", description="Local-first rarity classification shell")

_SCHEDULE: EmissionSchedule = EmissionSchedule.from_env()


class TierInfo(BaseModel):
    rarity: Rarity
    code: Optional[int]
    black: bool


class DeriveRequest(BaseModel):
    epoch: int = Field(ge=0)
    epoch_position: int = Field(ge=0)
    period_position: int = Field(ge=0)
    subsidy_position: int = Field(ge=0)
    subsidy: Optional[int] = None


class CoordinateOutput(BaseModel):
    epoch: int
    epoch_position: int
    period_position: int
    subsidy_position: int


class DeriveResponse(BaseModel):
    coordinate: CoordinateOutput
    subsidy: int
    rarity: Rarity


class ScheduleOutput(BaseModel):
    halving_interval: int
    diffchange_interval: int
    initial_subsidy: int


@app.middleware("http")
async def _local_only(request: Request, call_next):
    client = request.client
    if client is not None:
        host = client.host
        if host not in {"127.0.0.1", "::1", "testclient"}:
            logger.warning("rejected remote request from %s", host)
            return JSONResponse({"error": "Remote access disabled."}, status_code=403)
    return await call_next(request)


async def _handle_errors(request: Request, exc: Exception):
    logger.warning("rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"error": str(exc)}, status_code=400)


for _exc_class in (
    CoordinateError,
    InvalidRarity,
    InvalidRarityCode,
    ScheduleError,
):
    app.add_exception_handler(_exc_class, _handle_errors)


@app.get("/api/tiers", response_model=List[TierInfo])
async def list_tiers():
    return [_tier_info(rarity) for rarity in Rarity]


@app.get("/api/rarity/code/{value}", response_model=TierInfo)
async def rarity_from_code(value: int):
    return _tier_info(Rarity.from_code(value))


@app.get("/api/rarity/{name}", response_model=TierInfo)
async def rarity_detail(name: str):
    return _tier_info(Rarity.parse(name))


@app.post("/api/derive", response_model=DeriveResponse)
async def derive(payload: DeriveRequest):
    coordinate = PositionalCoordinate(
        epoch=payload.epoch,
        epoch_position=payload.epoch_position,
        period_position=payload.period_position,
        subsidy_position=payload.subsidy_position,
    )
    subsidy = payload.subsidy if payload.subsidy is not None else _SCHEDULE.subsidy(coordinate.epoch)
    validate_coordinate(coordinate, subsidy)

    rarity = derive_rarity(coordinate, subsidy, _SCHEDULE)
    logger.debug("derived %s for %s with subsidy %d", rarity, coordinate, subsidy)
    return DeriveResponse(
        coordinate=CoordinateOutput(**coordinate.to_dict()),
        subsidy=subsidy,
        rarity=rarity,
    )


@app.get("/api/schedule", response_model=ScheduleOutput)
async def schedule():
    return ScheduleOutput(**_SCHEDULE.to_dict())


def _tier_info(rarity: Rarity) -> TierInfo:
    return TierInfo(rarity=rarity, code=rarity.code, black=rarity.is_black)


def _set_schedule(schedule: EmissionSchedule) -> None:
    global _SCHEDULE
    _SCHEDULE = schedule


def _reset_state() -> None:
    _set_schedule(EmissionSchedule.from_env())
