# utils/lang_utils.py
from __future__ import annotations

import re
from typing import Optional

# UI language keys, same order as the language switcher
LANGUAGE_KEYS = ("th", "en", "jp", "zh", "kr", "my", "ru", "fr", "vn", "in")
DEFAULT_LANGUAGE = "th"

_FULL_CODES = {
    "th-th": "th-TH",
    "en-us": "en-US",
    "en-gb": "en-US",
    "ja-jp": "ja-JP",
    "zh-cn": "zh-CN",
    "ko-kr": "ko-KR",
    "ms-my": "ms-MY",
    "fr-fr": "fr-FR",
    "vi-vn": "vi-VN",
    "hi-in": "hi-IN",
}

_PRIMARY_CODES = {
    "th": "th-TH",
    "en": "en-US",
    "ja": "ja-JP", "jp": "ja-JP",
    "zh": "zh-CN", "cn": "zh-CN",
    "ko": "ko-KR", "kr": "ko-KR",
    "ms": "ms-MY", "my": "ms-MY",
    "fr": "fr-FR",
    "vi": "vi-VN", "vn": "vi-VN",
    "hi": "hi-IN", "in": "hi-IN",
}


def normalize_language_key(lang: Optional[str]) -> str:
    k = (lang or "").strip().lower()
    return k if k in LANGUAGE_KEYS else DEFAULT_LANGUAGE


def normalize_browser_lang(code: Optional[str]) -> str:
    """
    Browser locale -> canonical tag for analytics ("en-gb" -> "en-US").
    Unknown codes pass through unchanged.
    """
    c = (code or "").strip().lower()
    if not c:
        return "Unknown"
    if c in _FULL_CODES:
        return _FULL_CODES[c]
    main = re.split(r"[-_]", c)[0]
    return _PRIMARY_CODES.get(main, (code or "").strip())
