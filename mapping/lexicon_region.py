# mapping/lexicon_region.py
# -*- coding: utf-8 -*-
"""
노드 이름 → 지역 코드 매칭용 사전(SSOT)
- 지역 코드: HK, TW, JP, ... / 미검출 = OTHER
- 규칙 1개 = 국기 이모지 + 키워드(중/영) + 짧은 코드(단어 경계 매칭)
- REGION_RULES 순서 자체가 우선순위 (앞쪽 규칙이 먼저 이김)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

REGION_HK = "HK"
REGION_TW = "TW"
REGION_JP = "JP"
REGION_KR = "KR"
REGION_US = "US"
REGION_SG = "SG"
REGION_GB = "GB"
REGION_DE = "DE"
REGION_FR = "FR"
REGION_NL = "NL"
REGION_CA = "CA"
REGION_AU = "AU"
REGION_PH = "PH"
REGION_IN = "IN"
REGION_RU = "RU"
REGION_TR = "TR"
REGION_TH = "TH"
REGION_OTHER = "OTHER"


@dataclass(frozen=True)
class RegionRule:
    region: str
    emojis: Tuple[str, ...] = ()   # 원문 그대로 부분일치
    names: Tuple[str, ...] = ()    # 소문자 원문에 부분일치 (모두 소문자로 저장)
    codes: Tuple[str, ...] = ()    # 앞뒤가 ASCII 문자가 아닐 때만 일치


# 순서 주의: 다른 지역 키워드에 포함될 수 있는 키워드를 가진 규칙이 먼저 와야 함
REGION_RULES: Tuple[RegionRule, ...] = (
    RegionRule(
        region=REGION_HK,
        emojis=("🇭🇰",),
        names=("香港", "hong kong", "hongkong"),
        codes=("HK",),
    ),
    RegionRule(
        region=REGION_TW,
        emojis=("🇹🇼",),
        names=("台湾", "台北", "台中", "taiwan", "taipei"),
        codes=("TW",),
    ),
    RegionRule(
        region=REGION_JP,
        emojis=("🇯🇵",),
        names=("日本", "东京", "大阪", "japan", "tokyo", "osaka"),
        codes=("JP",),
    ),
    RegionRule(
        region=REGION_KR,
        emojis=("🇰🇷",),
        names=("韩国", "首尔", "korea", "seoul"),
        codes=("KR",),
    ),
    RegionRule(
        region=REGION_US,
        emojis=("🇺🇸",),
        names=(
            "美国", "洛杉矶", "纽约", "旧金山", "西雅图", "芝加哥",
            "达拉斯", "圣何塞", "硅谷", "凤凰城",
            "united states", "america", "los angeles", "new york",
            "san francisco", "seattle", "chicago", "dallas",
            "silicon valley", "san jose", "phoenix",
        ),
        codes=("US", "USA"),
    ),
    RegionRule(
        region=REGION_SG,
        emojis=("🇸🇬",),
        names=("新加坡", "狮城", "singapore"),
        codes=("SG",),
    ),
    RegionRule(
        region=REGION_GB,
        emojis=("🇬🇧",),
        names=("英国", "伦敦", "united kingdom", "britain", "england", "london"),
        codes=("UK", "GB"),
    ),
    RegionRule(
        region=REGION_DE,
        emojis=("🇩🇪",),
        names=("德国", "法兰克福", "柏林", "germany", "frankfurt", "berlin"),
        codes=("DE",),
    ),
    RegionRule(
        region=REGION_FR,
        emojis=("🇫🇷",),
        names=("法国", "巴黎", "france", "paris"),
        codes=("FR",),
    ),
    RegionRule(
        region=REGION_NL,
        emojis=("🇳🇱",),
        names=("荷兰", "阿姆斯特丹", "netherlands", "holland", "amsterdam"),
        codes=("NL",),
    ),
    RegionRule(
        region=REGION_CA,
        emojis=("🇨🇦",),
        names=("加拿大", "多伦多", "温哥华", "canada", "toronto", "vancouver"),
        codes=("CA",),
    ),
    RegionRule(
        region=REGION_AU,
        emojis=("🇦🇺",),
        names=("澳大利亚", "澳洲", "悉尼", "墨尔本", "australia", "sydney", "melbourne"),
        codes=("AU",),
    ),
    RegionRule(
        region=REGION_PH,
        emojis=("🇵🇭",),
        names=("菲律宾", "马尼拉", "philippines", "manila"),
        codes=("PH",),
    ),
    RegionRule(
        region=REGION_IN,
        emojis=("🇮🇳",),
        names=("印度", "孟买", "india", "mumbai"),
        # "IN"은 영어 단어로 너무 흔해서 코드 매칭 안 함
        codes=(),
    ),
    RegionRule(
        region=REGION_RU,
        emojis=("🇷🇺",),
        names=("俄罗斯", "莫斯科", "russia", "moscow"),
        codes=("RU",),
    ),
    RegionRule(
        region=REGION_TR,
        emojis=("🇹🇷",),
        names=("土耳其", "伊斯坦布尔", "turkey", "istanbul"),
        codes=("TR",),
    ),
    RegionRule(
        region=REGION_TH,
        emojis=("🇹🇭",),
        names=("泰国", "曼谷", "thailand", "bangkok"),
        codes=("TH",),
    ),
)

ALL_REGIONS: Tuple[str, ...] = tuple(r.region for r in REGION_RULES) + (REGION_OTHER,)

# 화면 표시용 라벨 (국기 + 중문 이름)
REGION_LABELS: Dict[str, str] = {
    REGION_HK: "🇭🇰 香港",
    REGION_TW: "🇹🇼 台湾",
    REGION_JP: "🇯🇵 日本",
    REGION_KR: "🇰🇷 韩国",
    REGION_US: "🇺🇸 美国",
    REGION_SG: "🇸🇬 新加坡",
    REGION_GB: "🇬🇧 英国",
    REGION_DE: "🇩🇪 德国",
    REGION_FR: "🇫🇷 法国",
    REGION_NL: "🇳🇱 荷兰",
    REGION_CA: "🇨🇦 加拿大",
    REGION_AU: "🇦🇺 澳大利亚",
    REGION_PH: "🇵🇭 菲律宾",
    REGION_IN: "🇮🇳 印度",
    REGION_RU: "🇷🇺 俄罗斯",
    REGION_TR: "🇹🇷 土耳其",
    REGION_TH: "🇹🇭 泰国",
    REGION_OTHER: "🔰 其他",
}

def is_valid_region(code: str) -> bool:
    return code in ALL_REGIONS

def region_label(code: str) -> str:
    return REGION_LABELS.get(code, REGION_LABELS[REGION_OTHER])

__all__ = [
    "RegionRule",
    "REGION_RULES",
    "ALL_REGIONS",
    "REGION_LABELS",
    "REGION_OTHER",
    "is_valid_region",
    "region_label",
]
