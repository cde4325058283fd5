# mapping/region_normalizer.py
# -*- coding: utf-8 -*-
"""
프록시 노드 이름 → 지역 코드 정규화
- 검사 순서(규칙 내부): 국기 이모지 → 키워드 → 짧은 코드
- 규칙 간: REGION_RULES 선언 순서대로, 처음 맞는 규칙이 이김
- 아무것도 안 맞으면 OTHER (예외 없음)
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional
from mapping.lexicon_region import REGION_RULES, REGION_OTHER, RegionRule

# ASCII 대문자 변환표 (비ASCII 문자는 그대로 → 인덱스가 어긋나지 않음)
_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
)

def _ascii_upper(s: str) -> str:
    return s.translate(_ASCII_UPPER)

def _is_ascii_letter(ch: str) -> bool:
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z")

def contains_code(name: str, code: str) -> bool:
    """
    짧은 코드(HK, USA 등)가 단어 경계에서 등장하는지 검사.
    앞/뒤 문자가 ASCII 알파벳이 아니면 경계로 본다 (숫자, 기호, 공백, 한자 포함).
      "HK-01", "HK01", "港HK" → True / "CHECK", "THRUST" → False
    """
    name_upper = _ascii_upper(name)
    code_upper = _ascii_upper(code)
    if not code_upper:
        return False
    n, size = len(name_upper), len(code_upper)
    start = 0
    while True:
        idx = name_upper.find(code_upper, start)
        if idx == -1:
            return False
        before_ok = idx == 0 or not _is_ascii_letter(name_upper[idx - 1])
        after = idx + size
        after_ok = after >= n or not _is_ascii_letter(name_upper[after])
        if before_ok and after_ok:
            return True
        # 한 칸만 전진 (겹치는 후보도 다시 검사)
        start = idx + 1

def match_rule(name: str, name_lower: str, rule: RegionRule) -> bool:
    # 1) 국기 이모지: 원문 그대로
    if any(e in name for e in rule.emojis):
        return True
    # 2) 중/영 키워드: 소문자 기준
    if any(kw in name_lower for kw in rule.names):
        return True
    # 3) 짧은 코드: 단어 경계
    return any(contains_code(name, c) for c in rule.codes)

def region_from_name(name: str) -> str:
    """노드 이름에서 지역 코드를 찾아 반환 (미검출 → OTHER)"""
    if not name:
        return REGION_OTHER
    name_lower = name.lower()
    for rule in REGION_RULES:
        if match_rule(name, name_lower, rule):
            return rule.region
    return REGION_OTHER

def group_by_region(names: Iterable[str], regions: Optional[Iterable[str]] = None) -> Dict[str, List[str]]:
    """
    {지역 코드: [노드 이름, ...]} — 지역은 처음 등장한 순서, 이름은 입력 순서 유지
    regions: 이미 분류된 결과가 있으면 names와 같은 순서로 전달 (재분류 안 함)
    """
    names = list(names)
    regions = [region_from_name(nm) for nm in names] if regions is None else list(regions)
    if len(regions) != len(names):
        raise ValueError(f"names/regions length mismatch: {len(names)} != {len(regions)}")
    groups: Dict[str, List[str]] = {}
    for nm, region in zip(names, regions):
        groups.setdefault(region, []).append(nm)
    return groups

__all__ = [
    "contains_code",
    "match_rule",
    "region_from_name",
    "group_by_region",
]
