"""
Utilidades de texto sin lógica de ledger.

Solo operan sobre strings. Las usan el DocumentSource (al leer) y el
scanner de líneas (para medir indentación y recortar campos sin perder
sus offsets).
"""


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n.

    Un archivo editado en Windows usa \\r\\n; sin normalizar, cada línea
    terminaría en '\\r' y ese carácter quedaría pegado al último campo.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n")


def leading_whitespace(text: str) -> int:
    """Cantidad de espacios/tabs al inicio del texto."""
    return len(text) - len(text.lstrip(" \t"))


def trimmed_bounds(text: str, start: int, end: int) -> tuple[int, int]:
    """Recorta espacios en text[start:end] y devuelve los nuevos índices.

    A diferencia de str.strip(), conserva la posición: el resultado
    sirve directamente como span.

    Ejemplos:
        >>> trimmed_bounds("a  bc  d", 1, 7)
        (3, 5)
    """
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    return start, end
