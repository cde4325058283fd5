# eval_region_parser.py
import os, json, argparse
from typing import List, Dict, Any
from mapping.lexicon_region import ALL_REGIONS
from mapping.region_normalizer import region_from_name
from utils.validate import validate_and_repair

def load_jsonl(path:str) -> List[Dict[str,Any]]:
    rows=[]
    with open(path,"r",encoding="utf-8") as f:
        for i, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                obj=json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"{path}:{i}: invalid JSON ({e.msg})") from e
            # {"input":..., "output":{"region":...}} / {"name":..., "region":...}
            rows.append(validate_and_repair(obj, line_no=i, source=path))
    return rows

def evaluate(rows:List[Dict[str,Any]], limit:int=None) -> Dict[str,Any]:
    n = len(rows) if limit is None else max(0, min(limit, len(rows)))
    hit=0
    per_total = {r:0 for r in ALL_REGIONS}
    per_hit   = {r:0 for r in ALL_REGIONS}
    errors=[]
    for r in rows[:n]:
        gold = r["region"]
        pred = region_from_name(r["input"])
        per_total[gold] += 1
        if pred == gold:
            hit += 1
            per_hit[gold] += 1
        else:
            errors.append({"input": r["input"], "pred": pred, "gold": gold})

    res = {
        "count": n,
        "accuracy": hit/n if n>0 else 0.0,
        # 골드에 등장한 지역만
        "per_region": {k: per_hit[k]/v for k,v in per_total.items() if v>0},
        "errors": errors,
    }
    return res

def dump_errors(errors:List[Dict[str,Any]], path:str, max_rows:int=200) -> int:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        rows = errors[:max_rows]
        for e in rows:
            f.write(json.dumps(e, ensure_ascii=False) + "\n")
    return len(rows)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--data_paths", type=str, nargs="+", required=True, help="Gold jsonl(s): {\"input\": name, \"output\": {\"region\": code}}")
    ap.add_argument("--limit", type=int, default=None, help="Evaluate on first N rows")
    ap.add_argument("--dump_errors", type=str, default="./eval_errors.jsonl")
    args = ap.parse_args()

    rows=[]
    for p in args.data_paths:
        rows.extend(load_jsonl(p))
    print(f"[data] total={len(rows)} files={len(args.data_paths)}")

    res = evaluate(rows, limit=args.limit)

    print("\n==== Evaluation ====")
    print(f"{'count':16s} : {res['count']}")
    print(f"{'accuracy':16s} : {res['accuracy']:.4f}")
    for k, v in res["per_region"].items():
        print(f"  {k:14s} : {v:.4f}")

    if args.dump_errors:
        dumped = dump_errors(res["errors"], args.dump_errors)
        print(f"\n[errors] {len(res['errors'])} mismatches, {dumped} dumped to: {args.dump_errors}")

if __name__ == "__main__":
    main()
