"""
Display labels for brands and payment methods.

Static lookup tables resolved at the presentation boundary; the domain only
deals in enum tags.
"""

from __future__ import annotations

from typing import Dict

from domain.enums import Brand, PaymentMethod

BRAND_LABELS: Dict[Brand, str] = {
    Brand.TOTEM: "ТОТЕМ",
    Brand.CERAMICS: "Керамика",
    Brand.CANDLES: "Гора",
}

PAYMENT_METHOD_LABELS: Dict[PaymentMethod, str] = {
    PaymentMethod.CASH: "Кеш",
    PaymentMethod.CARD: "POS",
    PaymentMethod.REVOLUT_LIDIA: "Револют Лидия",
    PaymentMethod.REVOLUT_IVAYLO: "Револют Ивайло",
}


def brand_label(brand: Brand) -> str:
    return BRAND_LABELS.get(brand, brand.name)


def payment_method_label(method: PaymentMethod) -> str:
    return PAYMENT_METHOD_LABELS.get(method, method.name)
