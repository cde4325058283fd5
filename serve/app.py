# serve/app.py
import logging
from typing import Dict, List
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from mapping.lexicon_region import ALL_REGIONS, region_label, REGION_OTHER
from mapping.region_normalizer import region_from_name, group_by_region
from serve.config import MAX_BATCH, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
log = logging.getLogger(__name__)
log.setLevel(LOG_LEVEL)

app = FastAPI()

class ClassifyIn(BaseModel):
    name: str

class BatchIn(BaseModel):
    names: List[str]

class RegionOut(BaseModel):
    name: str
    region: str
    label: str

class BatchOut(BaseModel):
    results: List[RegionOut]
    groups: Dict[str, List[str]]

def _tag(name: str) -> RegionOut:
    region = region_from_name(name)
    return RegionOut(name=name, region=region, label=region_label(region))

@app.get("/healthz")
def healthz():
    return {"status": "ok"}

@app.get("/regions")
def regions():
    return [{"region": r, "label": region_label(r)} for r in ALL_REGIONS]

@app.post("/classify", response_model=RegionOut)
def classify_endpoint(req: ClassifyIn):
    return _tag(req.name)

@app.post("/classify/batch", response_model=BatchOut)
def classify_batch_endpoint(req: BatchIn):
    if len(req.names) > MAX_BATCH:
        raise HTTPException(status_code=413, detail=f"batch too large: {len(req.names)} > {MAX_BATCH}")

    results = [_tag(nm) for nm in req.names]
    groups = group_by_region(req.names, regions=[r.region for r in results])
    unknown = len(groups.get(REGION_OTHER, []))
    log.info("[batch] size=%d groups=%d unknown=%d", len(results), len(groups), unknown)
    return BatchOut(results=results, groups=groups)
