"""
Almacén MongoDB para la colección de recetas.

Alternativa a Firestore para entornos locales. Los documentos se devuelven
sin el campo '_id', que pasa a ser el doc_id de la tupla con su tipo
original (ObjectId, int o str).

Uso:
    store = MongoRecipeStore(uri='mongodb://localhost:27017/',
                             database_name='recipe-mgmt-dev')
"""

from pymongo import MongoClient

from .base import BaseRecipeStore, DocumentNotFoundError


class MongoRecipeStore(BaseRecipeStore):
    """
    Implementación de BaseRecipeStore sobre pymongo.
    """

    name = "mongo"

    def __init__(self, uri, database_name, client=None):
        self.uri = uri
        self.database_name = database_name
        self.client = client or MongoClient(uri, serverSelectionTimeoutMS=5000)
        self.db = self.client[database_name]

    def ping(self):
        """Verifica la conexión. Lanza ConnectionFailure si no hay servidor."""
        self.client.admin.command("ping")

    def fetch_all(self, collection_name):
        cursor = self.db[collection_name].find()
        return [self._split_doc(doc) for doc in cursor]

    def fetch_first(self, collection_name):
        doc = self.db[collection_name].find_one()
        if doc is None:
            return None
        return self._split_doc(doc)

    def update(self, collection_name, doc_id, patch):
        # $set hace merge a nivel de campo de primer nivel
        result = self.db[collection_name].update_one({"_id": doc_id}, {"$set": patch})
        if result.matched_count == 0:
            raise DocumentNotFoundError(
                f"Ningún documento con _id={doc_id!r} en '{collection_name}'"
            )

    def close(self):
        self.client.close()

    @staticmethod
    def _split_doc(doc):
        # El _id se devuelve tal cual (ObjectId, int, str...) para que
        # update() encuentre el mismo documento
        data = dict(doc)
        doc_id = data.pop("_id", None)
        return doc_id, data
