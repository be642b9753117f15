"""
Configuración centralizada para el sistema de migración de recetas.

ARQUITECTURA:
Una única colección de documentos ('recipes') en un almacén documental:
- Firestore (por defecto): proyecto GCP tomado de GCP_PROJECT_ID
- MongoDB (alternativo): misma colección en MONGO_DATABASE_NAME

FLUJO DE MIGRACIÓN:
1. Ejecutar migradores en orden de MIGRATION_ORDER
2. Cada documento se lee, se calcula su patch y se aplica solo si no está vacío
3. Los scripts de analyzers/ son de solo lectura

USO DE LAS FUNCIONES HELPER:
    # Obtener configuración de colección
    config = get_collection_config('recipes')
    migrator = config['migrator']  # 'recipes'

    # Settings explícitos para construir el almacén
    settings = get_store_settings()
    store = FirestoreRecipeStore(**settings['firestore'])
"""

import os
from dotenv import load_dotenv

# Carga las variables del archivo .env en las variables de entorno del sistema
load_dotenv(override=True)

# --- Configuración de GCP / Firestore ---
# Las credenciales vienen del mecanismo ambiente de Google
# (GOOGLE_APPLICATION_CREDENTIALS o credenciales por defecto de gcloud)
GCP_PROJECT_ID = os.getenv("GCP_PROJECT_ID") or "recipe-mgmt-dev"

# --- Configuración de MongoDB (alternativo) ---
MONGO_URI = os.getenv("MONGO_URI") or "mongodb://localhost:27017/"
MONGO_DATABASE_NAME = os.getenv("MONGO_DATABASE_NAME") or GCP_PROJECT_ID

# --- Backend de almacenamiento ---
# 'firestore' o 'mongo'
STORE_BACKEND = (os.getenv("STORE_BACKEND") or "firestore").strip().lower()

# Cada backend define:
# - module: Módulo dentro de stores/
# - class_name: Clase que implementa BaseRecipeStore
STORE_BACKENDS = {
    "firestore": {
        "module": "stores.firestore",
        "class_name": "FirestoreRecipeStore",
    },
    "mongo": {
        "module": "stores.mongo",
        "class_name": "MongoRecipeStore",
    },
}

# --- Configuración Multi-Colección ---
# Cada colección define:
# - migrator: Nombre del módulo en migrators/ (recipes → RecipesMigrator)
# - description: Descripción de negocio de la colección

RECIPES_COLLECTION = "recipes"

COLLECTIONS = {
    RECIPES_COLLECTION: {
        "migrator": "recipes",
        "description": "Recetas: tiempos numéricos → texto + minutos, tips en array → texto, title → recipeName",
    },
}

# --- Orden de Migración ---
MIGRATION_ORDER = [
    RECIPES_COLLECTION,
]


# --- Funciones Helper ---


def get_collection_config(collection_name: str) -> dict:
    """
    Obtiene la configuración de una colección por nombre.

    Args:
        collection_name: Nombre de la colección (ej: 'recipes')

    Returns:
        dict: Configuración de la colección con keys:
              - migrator: Nombre del módulo migrador
              - description: Descripción de negocio

    Raises:
        KeyError: Si la colección no está configurada

    Ejemplo:
        >>> config = get_collection_config('recipes')
        >>> print(config['migrator'])
        'recipes'
    """
    if collection_name not in COLLECTIONS:
        available = ", ".join(COLLECTIONS.keys())
        raise KeyError(
            f"Colección '{collection_name}' no está configurada.\n"
            f"Colecciones disponibles: {available}"
        )
    return COLLECTIONS[collection_name]


def get_migrator_for_collection(collection_name: str) -> str:
    """
    Obtiene el nombre del módulo migrador para una colección.

    Ejemplo:
        >>> get_migrator_for_collection('recipes')
        'recipes'
    """
    config = get_collection_config(collection_name)
    return config["migrator"]


def get_store_backend_config(backend: str = None) -> dict:
    """
    Obtiene módulo y clase del backend de almacenamiento.

    Args:
        backend: Nombre del backend. Por defecto STORE_BACKEND.

    Raises:
        KeyError: Si el backend no existe
    """
    backend = backend or STORE_BACKEND
    if backend not in STORE_BACKENDS:
        available = ", ".join(STORE_BACKENDS.keys())
        raise KeyError(
            f"Backend '{backend}' no está soportado.\n"
            f"Backends disponibles: {available}"
        )
    return STORE_BACKENDS[backend]


def get_store_settings() -> dict:
    """
    Retorna los parámetros de construcción de cada backend.

    Se leen una sola vez desde el entorno (ver arriba) y se pasan
    explícitamente al constructor del almacén, de modo que stores/ y
    migrators/ no dependen de variables globales.

    Returns:
        dict: {'firestore': {...}, 'mongo': {...}}
    """
    return {
        "firestore": {"project_id": GCP_PROJECT_ID},
        "mongo": {"uri": MONGO_URI, "database_name": MONGO_DATABASE_NAME},
    }
