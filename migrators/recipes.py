"""
Migrador para la colección recipes.

Implementa la interfaz BaseMigrator para reescribir documentos del esquema
antiguo de recetas al esquema actual, en el mismo almacén.

RESPONSABILIDAD:
- Tiempos numéricos (prepTime, cookTime, totalTime) → texto "<n> minutes"
  + campo entero <campo>Minutes
- Tiempos en texto sin <campo>Minutes → extraer el primer número
- totalTime derivado de prep + cook cuando no existe
- tips.makeAhead / tips.storage / tips.reheating en array → texto
- title → recipeName cuando recipeName no existe

DECISIONES DE DISEÑO:
- Cada regla es condicional e idempotente: un documento ya migrado produce
  un patch vacío
- Nunca se borra un campo (title se conserva)
- updatedAt solo se agrega si hay algún otro cambio
- Valores None se tratan como ausentes
- Del texto solo se toma el primer grupo de dígitos: "1 to 2 hours" → 1
  (comportamiento histórico, no convierte unidades)

Uso (desde recipemigra.py):
    migrator = RecipesMigrator(collection='recipes')
    patch = migrator.compute_patch(data)
    if patch:
        store.update('recipes', doc_id, patch)
"""

import re

from .base import BaseMigrator

DURATION_FIELDS = ("prepTime", "cookTime", "totalTime")

# Campos de tips que deben ser texto
TEXT_TIP_FIELDS = ("makeAhead", "storage", "reheating")

# Campos de tips que son listas y se copian tal cual
LIST_TIP_FIELDS = ("substitutions", "variations")

# Solo dígitos ASCII (\d de Python acepta otros sistemas numéricos)
DIGITS_RE = re.compile(r"[0-9]+")


class MalformedRecipeError(ValueError):
    """El documento tiene una estructura que no se puede migrar."""


# =========================================================================
# DECODIFICACIÓN DE CAMPOS
# =========================================================================


def decode_duration(value):
    """
    Clasifica un tiempo del esquema antiguo o nuevo.

    Returns:
        tuple | None: ('number', n), ('string', s) o None si está ausente
                      o tiene un tipo no reconocido.

    Ejemplo:
        >>> decode_duration(15)
        ('number', 15)
        >>> decode_duration('15 minutes')
        ('string', '15 minutes')
    """
    # bool es subclase de int, no es un tiempo
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return ("number", value)
    if isinstance(value, str):
        return ("string", value)
    return None


def decode_tip(value):
    """
    Clasifica un campo de tips.

    Returns:
        tuple | None: ('list', [...]), ('string', s) o None si es falsy.
                      Otros tipos truthy se devuelven como ('string', value)
                      para copiarlos sin cambios.
    """
    if isinstance(value, (list, tuple)):
        return ("list", list(value))
    if value:
        return ("string", value)
    return None


def format_minutes(minutes):
    """15 → '15 minutes'"""
    return f"{minutes} minutes"


def parse_minutes(text):
    """
    Extrae el primer grupo de dígitos de un texto.

    Returns:
        int | None: None si no hay dígitos

    Ejemplo:
        >>> parse_minutes('15 minutes')
        15
        >>> parse_minutes('1 to 2 hours')
        1
    """
    match = DIGITS_RE.search(text)
    if not match:
        return None
    return int(match.group(0))


def join_tip(items, field):
    """Une una lista de tips con un espacio."""
    for item in items:
        if not isinstance(item, str):
            raise MalformedRecipeError(
                f"tips.{field} contiene un valor que no es texto: {item!r}"
            )
    return " ".join(items)


class RecipesMigrator(BaseMigrator):
    """
    Migrador específico para la colección recipes.
    """

    def __init__(self, collection="recipes", clock=None, verbose=False):
        super().__init__(collection, clock)
        self.verbose = verbose

    # =========================================================================
    # MÉTODOS PÚBLICOS
    # =========================================================================

    def compute_patch(self, doc):
        patch = {}

        for field in DURATION_FIELDS:
            patch.update(self._migrate_duration(doc, field))

        patch.update(self._derive_total_time(doc, patch))

        tips = self._migrate_tips(doc.get("tips"))
        if tips is not None:
            patch["tips"] = tips

        if doc.get("title") and not doc.get("recipeName"):
            patch["recipeName"] = doc["title"]
            self._log(f"✓ Migrando title → recipeName: \"{doc['title']}\"")

        if patch:
            patch["updatedAt"] = self.clock()

        return patch

    def get_display_name(self, doc):
        return doc.get("recipeName") or doc.get("title") or "Untitled"

    # =========================================================================
    # MÉTODOS PRIVADOS: REGLAS
    # =========================================================================

    def _migrate_duration(self, doc, field):
        minutes_field = f"{field}Minutes"
        decoded = decode_duration(doc.get(field))
        if decoded is None:
            return {}

        kind, value = decoded
        if kind == "number":
            self._log(f"✓ Convirtiendo {field}: {value} → {format_minutes(value)}")
            return {minutes_field: value, field: format_minutes(value)}

        if doc.get(minutes_field) is not None:
            return {}

        minutes = parse_minutes(value)
        if minutes is None:
            return {}
        self._log(f"✓ Extrayendo {minutes_field} de \"{value}\": {minutes}")
        return {minutes_field: minutes}

    def _derive_total_time(self, doc, patch):
        """
        totalTime = prep + cook, solo si ambos se conocen y no hay
        totalTime explícito (ni en el documento ni recién calculado).
        """
        prep = self._known_minutes(doc, patch, "prepTimeMinutes")
        cook = self._known_minutes(doc, patch, "cookTimeMinutes")
        if prep is None or cook is None:
            return {}

        if self._known_minutes(doc, patch, "totalTimeMinutes") is not None:
            return {}
        if doc.get("totalTime") is not None:
            return {}

        total = prep + cook
        self._log(f"✓ totalTime calculado: {format_minutes(total)}")
        return {"totalTimeMinutes": total, "totalTime": format_minutes(total)}

    def _migrate_tips(self, tips):
        """
        Retorna el sub-dict tips completo si algún campo de texto estaba en
        array, o None si no hay nada que convertir.
        """
        if not tips:
            return None
        if not isinstance(tips, dict):
            raise MalformedRecipeError(
                f"tips debe ser un objeto, se recibió {type(tips).__name__}"
            )

        result = {}
        converted = False

        for field in TEXT_TIP_FIELDS:
            decoded = decode_tip(tips.get(field))
            if decoded is None:
                continue
            kind, value = decoded
            if kind == "list":
                result[field] = join_tip(value, field)
                converted = True
                self._log(f"✓ Convirtiendo tips.{field} de array a texto")
            else:
                result[field] = value

        for field in LIST_TIP_FIELDS:
            if tips.get(field):
                result[field] = tips[field]

        return result if converted else None

    @staticmethod
    def _known_minutes(doc, patch, field):
        if patch.get(field) is not None:
            return patch[field]
        decoded = decode_duration(doc.get(field))
        if decoded is None or decoded[0] != "number":
            return None
        return decoded[1]

    def _log(self, message):
        if self.verbose:
            print(f"  {message}")
