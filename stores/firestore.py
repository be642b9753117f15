"""
Almacén Firestore para la colección de recetas.

Usa el cliente oficial google-cloud-firestore. El proyecto se recibe
explícitamente en el constructor (ver config.get_store_settings()); las
credenciales las resuelve la librería desde el entorno
(GOOGLE_APPLICATION_CREDENTIALS).

Uso:
    store = FirestoreRecipeStore(project_id='recipe-mgmt-dev')
    for doc_id, data in store.fetch_all('recipes'):
        ...
    store.update('recipes', doc_id, {'recipeName': 'Tarta'})
"""

from google.api_core.exceptions import NotFound
from google.cloud import firestore

from .base import BaseRecipeStore, DocumentNotFoundError


class FirestoreRecipeStore(BaseRecipeStore):
    """
    Implementación de BaseRecipeStore sobre Firestore.
    """

    name = "firestore"

    def __init__(self, project_id, client=None):
        self.project_id = project_id
        self.client = client or firestore.Client(project=project_id)

    def fetch_all(self, collection_name):
        # get() materializa el snapshot completo, igual que una lectura única
        snapshot = self.client.collection(collection_name).get()
        return [(doc.id, doc.to_dict() or {}) for doc in snapshot]

    def fetch_first(self, collection_name):
        snapshot = self.client.collection(collection_name).limit(1).get()
        for doc in snapshot:
            return doc.id, doc.to_dict() or {}
        return None

    def update(self, collection_name, doc_id, patch):
        # DocumentReference.update() hace merge: solo toca los campos del patch
        try:
            self.client.collection(collection_name).document(doc_id).update(patch)
        except NotFound as e:
            raise DocumentNotFoundError(
                f"Ningún documento con id={doc_id!r} en '{collection_name}'"
            ) from e

    def close(self):
        self.client.close()
