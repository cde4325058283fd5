# utils/validate.py
from typing import Any, Dict
from mapping.lexicon_region import REGION_OTHER, is_valid_region

# 골드 데이터에 섞여 있는 별칭 표기 → 표준 코드
CODE_ALIASES = {
    "UK": "GB",
    "USA": "US",
    "UNKNOWN": REGION_OTHER,
    "": REGION_OTHER,
}

def repair_region_code(value: Any) -> str:
    if not isinstance(value, str):
        return REGION_OTHER
    code = value.strip().upper()
    code = CODE_ALIASES.get(code, code)
    return code if is_valid_region(code) else REGION_OTHER

def validate_and_repair(obj: Dict[str, Any], line_no: int = 0, source: str = "") -> Dict[str, Any]:
    """
    평가 행 포맷 통일: {"input": str, "region": str}
    허용 입력: {"input":..., "output":{"region":...}} 또는 {"name":..., "region":...}
    """
    where = f"{source}:{line_no}" if source else f"line {line_no}"
    if not isinstance(obj, dict):
        raise ValueError(f"{where}: expected a JSON object")

    text = obj.get("input", obj.get("name"))
    if not isinstance(text, str):
        raise ValueError(f"{where}: missing 'input' (or 'name') string")

    out = obj.get("output")
    gold = out.get("region") if isinstance(out, dict) else obj.get("region")
    if gold is None:
        raise ValueError(f"{where}: missing gold region ('output.region' or 'region')")

    return {"input": text, "region": repair_region_code(gold)}
