"""
Módulo: `utils/price.py`.
Finalidade: Conversão do preço digitado pelo usuário (vírgula ou ponto decimal).
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re


# NUMERIC(10, 2): até 8 dígitos na parte inteira
PRICE_RE = re.compile(r"^\d{1,8}(\.\d+)?$")
CENTS = Decimal("0.01")


def parse_price(value: str | None) -> Decimal | None:
    """Converte "12,50" ou "12.50" em Decimal("12.50"); None se inválido, negativo ou grande demais."""
    if not value:
        return None
    raw = value.strip().replace(",", ".", 1)
    if not PRICE_RE.match(raw):
        return None

    try:
        price = Decimal(raw).quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None

    if not price.is_finite() or price < 0:
        return None
    return price
