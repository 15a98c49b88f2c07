import logging
import os
from dataclasses import asdict

from fastapi import FastAPI

from app.core.models import Inputs, ProjectionRequest, ProjectionResponse
from app.core.pipeline import run_projection
from retirement.schemas import InputSnapshot

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

app = FastAPI(title="Retirement Income Projector API")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/defaults", response_model=Inputs)
def defaults():
    return Inputs(**asdict(InputSnapshot()))


@app.post("/project", response_model=ProjectionResponse)
def project(payload: ProjectionRequest):
    return run_projection(payload)
