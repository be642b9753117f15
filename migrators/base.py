"""
Módulo base para migradores de esquema de documentos.

Define la interfaz común (contrato) que todos los migradores específicos
deben implementar. Esto permite que recipemigra.py funcione con cualquier
migrador sin conocer sus detalles internos.

Patrón de diseño: Strategy Pattern
- recipemigra.py = Contexto (orquestador)
- BaseMigrator = Estrategia abstracta
- RecipesMigrator = Estrategia concreta

Flujo de uso:
1. recipemigra.py carga dinámicamente un migrador
2. Obtiene el snapshot de la colección desde el almacén
3. Llama a compute_patch() para cada documento
4. Si el patch no está vacío, lo aplica con store.update()

Ejemplo de implementación:
    class MiMigrador(BaseMigrator):
        def compute_patch(self, doc):
            if 'legacy' in doc:
                return {'nuevo': doc['legacy']}
            return {}

        def get_display_name(self, doc):
            return doc.get('name') or 'Untitled'
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


def utc_now():
    """Reloj por defecto: datetime con zona horaria UTC."""
    return datetime.now(timezone.utc)


class BaseMigrator(ABC):
    """
    Clase abstracta que define la interfaz para migradores de colecciones.

    Attributes:
        collection (str): Nombre de la colección que migra
        clock (callable): Función sin argumentos que retorna el instante
                          usado para updatedAt
    """

    def __init__(self, collection: str, clock=None):
        """
        Constructor base.

        Args:
            collection: Nombre de la colección (ej: 'recipes')
            clock: Reloj inyectable (tests). Por defecto utc_now.
        """
        self.collection = collection
        self.clock = clock or utc_now

    @abstractmethod
    def compute_patch(self, doc: dict) -> dict:
        """
        Calcula el update parcial de un documento.

        Debe ser una función pura sobre el documento: no consulta ni modifica
        el almacén, y reaplicarla sobre un documento ya migrado debe
        retornar un dict vacío.

        Args:
            doc: Datos del documento (dict campo → valor)

        Returns:
            dict: Solo los campos a modificar. Vacío si no hay cambios.

        Raises:
            Exception: Si el documento tiene una estructura inválida.
                       recipemigra.py lo registra como error de documento.
        """
        pass

    @abstractmethod
    def get_display_name(self, doc: dict) -> str:
        """
        Retorna un nombre legible del documento para los logs de progreso.
        """
        pass
