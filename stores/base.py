"""
Módulo base para almacenes documentales de recetas.

Define el contrato mínimo que recipemigra.py y los scripts de analyzers/
necesitan del almacén. Ninguno requiere transacciones, índices ni queries:

- fetch_all(): snapshot completo de una colección
- fetch_first(): primer documento (inspección)
- update(): merge de campos por identificador (los campos no nombrados
  en el patch quedan intactos, nunca se borra ningún campo)

Patrón de diseño: Strategy Pattern
- recipemigra.py = Contexto (orquestador)
- BaseRecipeStore = Estrategia abstracta
- FirestoreRecipeStore, MongoRecipeStore = Estrategias concretas

Los documentos se representan como tuplas (doc_id, data) donde doc_id es
un identificador opaco (se devuelve tal cual a update()) y data un dict
campo → valor.
"""

from abc import ABC, abstractmethod


class DocumentNotFoundError(LookupError):
    """update() no encontró el documento: no se escribió nada."""


class BaseRecipeStore(ABC):
    """
    Clase abstracta que define la interfaz de un almacén de recetas.

    Attributes:
        name (str): Nombre corto del backend (ej: 'firestore')
    """

    name = "base"

    @abstractmethod
    def fetch_all(self, collection_name: str) -> list:
        """
        Obtiene todos los documentos de una colección.

        Args:
            collection_name: Nombre de la colección (ej: 'recipes')

        Returns:
            list: Lista de tuplas (doc_id, data) en orden de llegada

        Raises:
            Cualquier error del driver si no se puede enumerar la colección.
            Para recipemigra.py es un error fatal.
        """
        pass

    @abstractmethod
    def fetch_first(self, collection_name: str):
        """
        Obtiene el primer documento de una colección.

        Returns:
            tuple | None: (doc_id, data) o None si la colección está vacía
        """
        pass

    @abstractmethod
    def update(self, collection_name: str, doc_id: str, patch: dict):
        """
        Aplica un patch parcial (merge) sobre un documento existente.

        Args:
            collection_name: Nombre de la colección
            doc_id: Identificador del documento
            patch: Dict solo con los campos a modificar

        Raises:
            DocumentNotFoundError: Si ningún documento tiene ese doc_id
        """
        pass

    def close(self):
        """Libera conexiones. Por defecto no hace nada."""
        pass
