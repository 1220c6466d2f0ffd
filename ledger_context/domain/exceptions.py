"""
Excepciones de dominio del proyecto ledger-context.

El parser de contexto NUNCA lanza excepciones para texto válido: una línea
que no se entiende se clasifica como OTHER y un cursor fuera de cualquier
campo devuelve None. Las excepciones de este módulo cubren solo las
fronteras donde sí puede haber una falla real: mutaciones aplicadas a
líneas que no son de una transacción, el motor externo (subprocess),
la lectura del archivo y la exportación.

Jerarquía:
    LedgerContextError
    ├── NotInTransactionError   → Se intentó editar una línea que no es transacción
    ├── UnknownReportError      → Verbo de reporte no registrado
    ├── DocumentError           → No se pudo leer el archivo ledger
    ├── EngineError             → El motor externo falló (exit != 0, timeout)
    │   └── EngineNotFoundError → El binario del motor no existe
    └── OutputError             → Error al generar el archivo de salida
"""


class LedgerContextError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    El CLI captura esta clase para mostrar el mensaje al usuario tal cual,
    sin traceback.
    """


class NotInTransactionError(LedgerContextError):
    """Se lanza cuando un mutador (fecha efectiva, estado) recibe una línea
    que no es encabezado de transacción ni posting."""

    def __init__(self, line_text: str, operacion: str):
        self.line_text = line_text
        self.operacion = operacion
        super().__init__(
            f"No se puede aplicar '{operacion}': la línea no pertenece a una "
            f"transacción: {line_text!r}"
        )


class UnknownReportError(LedgerContextError):
    """Se lanza cuando se pide un reporte que no está en el registro."""

    def __init__(self, verb: str, disponibles: list[str]):
        self.verb = verb
        self.disponibles = disponibles
        super().__init__(
            f"Reporte desconocido: '{verb}'. Disponibles: {', '.join(disponibles)}"
        )


class DocumentError(LedgerContextError):
    """Se lanza cuando no se puede leer un documento ledger.

    Esto puede pasar porque:
    - El archivo no existe.
    - No es UTF-8 válido.
    - La extensión no corresponde a ningún DocumentSource registrado.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error leyendo '{archivo}': {causa}")


class EngineError(LedgerContextError):
    """Se lanza cuando el motor contable externo termina con error.

    El texto de error del motor (stderr) se conserva sin modificar en
    `stderr` para que el host lo muestre verbatim al usuario.
    """

    def __init__(self, verb: str, causa: str, returncode: int | None = None, stderr: str = ""):
        self.verb = verb
        self.causa = causa
        self.returncode = returncode
        self.stderr = stderr
        mensaje = f"El motor falló ejecutando '{verb}': {causa}"
        if stderr.strip():
            mensaje += f"\n{stderr.strip()}"
        super().__init__(mensaje)


class EngineNotFoundError(EngineError):
    """El binario del motor no está instalado o no está en el PATH."""

    def __init__(self, verb: str, binary: str):
        self.binary = binary
        super().__init__(verb, f"no se encontró el ejecutable '{binary}'")


class OutputError(LedgerContextError):
    """Se lanza cuando falla la generación del archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - Hay un error en el formato del Excel.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
