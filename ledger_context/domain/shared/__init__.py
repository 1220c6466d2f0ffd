"""
Utilidades compartidas del dominio.

Funciones puras sobre tipos nativos de Python, usadas por los servicios
del dominio y por los adaptadores. No dependen de ninguna librería externa.

Uso:
    from ledger_context.domain.shared.date_parser import parse_partial_date, is_date_token
    from ledger_context.domain.shared.amount import parse_amount
    from ledger_context.domain.shared.text_cleaner import normalize_line_endings
"""
