"""
Almacenes documentales para la colección de recetas.

Cada almacén implementa la interfaz BaseRecipeStore y se carga dinámicamente
en runtime según config.STORE_BACKEND.

Estructura:
    base.py: Clase abstracta BaseRecipeStore
    firestore.py: Almacén Firestore (google-cloud-firestore)
    mongo.py: Almacén MongoDB (pymongo)

Los almacenes son instanciados por connect_to_store() en recipemigra.py
usando importlib.import_module() para carga dinámica.

Interfaz requerida (ver BaseRecipeStore):
    - fetch_all(collection_name)
    - fetch_first(collection_name)
    - update(collection_name, doc_id, patch)
    - close()
"""
