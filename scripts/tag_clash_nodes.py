# scripts/tag_clash_nodes.py
import argparse
import yaml
import pandas as pd
from typing import List
from mapping.lexicon_region import ALL_REGIONS, region_label
from mapping.region_normalizer import region_from_name, group_by_region

OUTPUT_PATH = "node_regions.csv"

def load_proxy_names(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    proxies = cfg.get("proxies") if isinstance(cfg, dict) else None
    if not isinstance(proxies, list):
        raise ValueError(f"{path}: no 'proxies' list in config")
    # 이름 없는(또는 빈 문자열) 노드는 건너뜀, 숫자 이름(0 포함)은 문자열로
    names = []
    for p in proxies:
        if not isinstance(p, dict) or p.get("name") is None:
            continue
        nm = str(p["name"])
        if nm:
            names.append(nm)
    return names

def tag_names(names: List[str]) -> pd.DataFrame:
    regions = [region_from_name(nm) for nm in names]
    return pd.DataFrame({
        "name": names,
        "region": regions,
        "label": [region_label(r) for r in regions],
    })

def region_summary(df: pd.DataFrame) -> pd.DataFrame:
    """지역별 노드 수 (규칙 순서, 0개 지역 제외)"""
    groups = group_by_region(df["name"].tolist(), regions=df["region"].tolist())
    order = [r for r in ALL_REGIONS if r in groups]
    return pd.DataFrame({
        "region": order,
        "label": [region_label(r) for r in order],
        "count": [len(groups[r]) for r in order],
    })

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("config", help="Clash YAML config with a 'proxies' list")
    ap.add_argument("--out", default=OUTPUT_PATH)
    args = ap.parse_args()

    names = load_proxy_names(args.config)
    df = tag_names(names)
    df.to_csv(args.out, index=False, encoding="utf-8")

    summary = region_summary(df)
    for label, n in zip(summary["label"], summary["count"]):
        print(f"{label:10s} {n:5d}")
    print(f"[OK] tagged {len(df)} nodes → {args.out}")

if __name__ == "__main__":
    main()
