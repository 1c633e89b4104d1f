"""Month names per dialect, in Solar Hijri month order (month 1 = spring equinox)."""

from __future__ import annotations

from typing import Dict, Tuple

from kurdical.core.types import Dialect

MONTH_NAMES: Dict[Dialect, Tuple[str, ...]] = {
    Dialect.LAKI: (
        "په‌نجه",
        "گاکۆڵ",
        "جۆزه‌ردان",
        "پووشپه‌ڕ",
        "گه‌لاوێژ",
        "خه‌رمانان",
        "ڕه‌زبه‌ر",
        "خه‌زه‌ڵوه‌ر",
        "سه‌رماوه‌ز",
        "به‌فرانبار",
        "چڵه‌",
        "ڕه‌شه‌مێ",
    ),
    Dialect.HAWRAMI: (
        "نه‌ورۆز",
        "پاژه‌ره‌ژ",
        "که‌وچڕ",
        "ئاگران",
        "گه‌لاوێژ",
        "ده‌ڕۆ",
        "ته‌ره‌زێ",
        "خه‌زه‌ڵوه‌ر",
        "سه‌رماوه‌ز",
        "ئێڵه‌کۆ",
        "ڕێبه‌ندان",
        "ڕه‌شه‌مه‌",
    ),
    Dialect.SORANI: (
        "خاکه‌لێوه",
        "گوڵان",
        "جۆزه‌ردان",
        "پووشپه‌ڕ",
        "گه‌لاوێژ",
        "خه‌رمانان",
        "ڕه‌زبه‌ر",
        "گه‌ڵاڕێزان",
        "سه‌رماوه‌ز",
        "به‌فرانبار",
        "ڕێبه‌ندان",
        "ڕه‌شه‌مێ",
    ),
    Dialect.KALHURI: (
        "جه‌ژنان (جه‌شنان)",
        "گوڵان",
        "زه‌ردان",
        "په‌رپه‌ر",
        "گه‌لاوێژ",
        "نوخشان",
        "به‌ران",
        "خه‌زان",
        "سه‌رماوه‌ز",
        "به‌فران",
        "به‌ندان",
        "ڕه‌شه‌مه‌",
    ),
    Dialect.KURMANJI: (
        "نیسان",
        "گولان",
        "حه‌زیران",
        "تیرمه‌ه",
        "ته‌باخ",
        "ئیلۆن",
        "چریا ئێکێ",
        "چریا دووێ",
        "کانوونا ئێکێ",
        "کانوونا دووێ",
        "شوبات",
        "ئادار",
    ),
}
