"""
Lectura de montos de postings.

El campo AMOUNT que devuelve el locator es texto crudo ('$-42.50',
'-42.50 USD', '10 AAPL @ $150.00'). El parser no lo interpreta: la
aritmética es cosa del motor externo. Este módulo solo existe para la
exportación, donde conviene tener la cantidad como número.

Se usa Decimal (nunca float) para las cantidades.
"""

import re
from decimal import Decimal, InvalidOperation

# Cantidad con signo, separadores de miles opcionales y decimales opcionales.
_QUANTITY: str = r"-?\d[\d,]*(?:\.\d+)?|-?\.\d+"

# Commodity: símbolo(s) o palabra, o texto entre comillas ("MUTUAL FUND").
_COMMODITY: str = r'"[^"]+"|[^\s\d.,@;()"\-][^\s\d.,@;()"\-]*'

_PREFIX_AMOUNT: re.Pattern[str] = re.compile(
    rf"^(?P<sign>-)?\s*(?P<commodity>{_COMMODITY})\s*(?P<quantity>{_QUANTITY})$"
)
_SUFFIX_AMOUNT: re.Pattern[str] = re.compile(
    rf"^(?P<quantity>{_QUANTITY})\s*(?P<commodity>{_COMMODITY})?$"
)


def parse_amount(text: str) -> tuple[str, Decimal]:
    """Convierte el texto de un monto a (commodity, cantidad).

    Solo se interpreta la primera parte del monto: el precio por unidad
    ('@ $150') o el costo ('{...}') se ignoran.

    Args:
        text: Texto del campo AMOUNT.

    Returns:
        Tupla (commodity, cantidad). Commodity vacío si no hay símbolo.

    Raises:
        ValueError: Si el texto no contiene un monto reconocible.

    Ejemplos:
        >>> parse_amount("$-42.50")
        ('$', Decimal('-42.50'))
        >>> parse_amount("-$1,234.56")
        ('$', Decimal('-1234.56'))
        >>> parse_amount("10 AAPL @ $150.00")
        ('AAPL', Decimal('10'))
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_amount espera str, recibió {type(text).__name__}")

    cleaned = re.split(r"[@{(=]", text, maxsplit=1)[0].strip()
    if not cleaned:
        raise ValueError(f"No se pudo extraer un monto de: '{text}'")

    sign = ""
    m = _PREFIX_AMOUNT.match(cleaned)
    if m:
        sign = m.group("sign") or ""
    else:
        m = _SUFFIX_AMOUNT.match(cleaned)
    if not m:
        raise ValueError(f"No se pudo extraer un monto de: '{text}'")

    commodity = (m.group("commodity") or "").strip('"')
    quantity_text = sign + m.group("quantity").replace(",", "")
    if quantity_text.startswith("--"):
        quantity_text = quantity_text[2:]

    try:
        quantity = Decimal(quantity_text)
    except InvalidOperation:
        raise ValueError(f"No se pudo convertir a monto: '{text}' (limpio: '{quantity_text}')")

    return commodity, quantity


def is_amount_string(text: str) -> bool:
    """Detecta si un texto parece un monto de posting.

    Ejemplos:
        >>> is_amount_string("$-42.50")
        True
        >>> is_amount_string("Assets:Checking")
        False
    """
    if not text or not text.strip():
        return False
    try:
        parse_amount(text)
    except ValueError:
        return False
    return True
