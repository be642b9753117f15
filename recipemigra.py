r"""
Script principal de migración de esquema de recetas.

Arquitectura con carga dinámica de almacén y migradores:
- recipemigra.py: Infraestructura genérica (conexión, recorrido, progreso)
- stores/*.py: Acceso al almacén documental (implementan BaseRecipeStore)
- migrators/*.py: Reglas de transformación por colección (implementan BaseMigrator)
- config.py: Configuración centralizada

Flujo de ejecución:
1. Sistema carga dinámicamente el almacén de config.STORE_BACKEND
2. Para cada colección de config.MIGRATION_ORDER carga su migrador
3. Obtiene el snapshot completo de la colección (error fatal si falla)
4. Para cada documento, en orden y de a uno:
   - calcula el patch (compute_patch)
   - si no está vacío lo aplica (merge) y cuenta 'updated'
   - si está vacío cuenta 'skipped'
   - si algo falla registra id + documento y cuenta 'error'
5. Imprime resumen

Códigos de salida:
    0: Migración completada (aunque haya errores por documento)
    1: Error fatal (conexión o lectura de la colección)

Uso:
    python recipemigra.py

    # Con MongoDB en vez de Firestore
    STORE_BACKEND=mongo python recipemigra.py
"""

import importlib
import io
import json
import sys
from pathlib import Path

from google.api_core.exceptions import GoogleAPICallError
from google.auth.exceptions import DefaultCredentialsError
from pymongo.errors import ConnectionFailure

# Asegurar que el directorio raíz esté en sys.path para imports dinámicos
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import config
from migrators.base import BaseMigrator
from stores.base import BaseRecipeStore

UPDATED = "updated"
SKIPPED = "skipped"
ERRORED = "error"

# Errores de driver que impiden conectar o leer: la ejecución termina con 1
STORE_CONNECTION_ERRORS = (ConnectionFailure, GoogleAPICallError, DefaultCredentialsError)


def connect_to_store(backend=None):
    """
    Construye el almacén configurado usando los settings de config.py.

    Args:
        backend: Nombre del backend. Por defecto config.STORE_BACKEND.

    Returns:
        BaseRecipeStore: Instancia conectada

    Raises:
        SystemExit: Si el backend no existe o no puede conectar
    """
    backend = backend or config.STORE_BACKEND
    try:
        backend_config = config.get_store_backend_config(backend)
    except KeyError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    try:
        module = importlib.import_module(backend_config["module"])
        store_class = getattr(module, backend_config["class_name"])
    except (ModuleNotFoundError, AttributeError) as e:
        print(f"❌ No se pudo cargar el almacén '{backend}'", file=sys.stderr)
        print(f"   Detalle: {e}", file=sys.stderr)
        sys.exit(1)

    if not issubclass(store_class, BaseRecipeStore):
        print(
            f"❌ {backend_config['class_name']} no hereda de BaseRecipeStore",
            file=sys.stderr,
        )
        sys.exit(1)

    try:
        print(f"🔌 Conectando a {backend}...")
        settings = config.get_store_settings().get(backend, {})
        store = store_class(**settings)

        # Solo Mongo permite verificar la conexión antes de leer
        if hasattr(store, "ping"):
            store.ping()

        print(f"✅ Conexión a {backend} exitosa")
        return store
    except STORE_CONNECTION_ERRORS as e:
        print(f"❌ Error de conexión a {backend}", file=sys.stderr)
        print(f"   Detalle: {e}", file=sys.stderr)
        sys.exit(1)


def load_migrator_for_collection(collection_name, clock=None, verbose=False):
    """
    Carga dinámicamente el migrador correspondiente a una colección.

    Convención de nombres:
        recipes → migrators.recipes → RecipesMigrator

    Args:
        collection_name: Nombre de la colección
        clock: Reloj inyectable para updatedAt
        verbose: Imprimir cada conversión de campo

    Returns:
        BaseMigrator: Instancia del migrador específico

    Raises:
        SystemExit: Si no existe el módulo o la clase

    Example:
        >>> migrator = load_migrator_for_collection('recipes')
        >>> type(migrator).__name__
        'RecipesMigrator'
    """
    base_name = config.get_migrator_for_collection(collection_name)

    # Construir nombre de clase: recipes → RecipesMigrator
    class_name = (
        "".join(word.capitalize() for word in base_name.split("_")) + "Migrator"
    )

    try:
        module = importlib.import_module(f"migrators.{base_name}")
        migrator_class = getattr(module, class_name)

        # Verificar que hereda de BaseMigrator (type safety en runtime)
        if not issubclass(migrator_class, BaseMigrator):
            print(f"❌ {class_name} no hereda de BaseMigrator", file=sys.stderr)
            sys.exit(1)

        return migrator_class(collection=collection_name, clock=clock, verbose=verbose)

    except ModuleNotFoundError:
        print(f"❌ No existe migrador para '{collection_name}'", file=sys.stderr)
        print(f"   Se esperaba: migrators/{base_name}.py", file=sys.stderr)
        sys.exit(1)
    except AttributeError:
        print(
            f"❌ El módulo migrators.{base_name} no tiene la clase '{class_name}'",
            file=sys.stderr,
        )
        sys.exit(1)


def migrate_document(store, migrator, doc_id, data):
    """
    Migra un único documento.

    Returns:
        str: UPDATED, SKIPPED o ERRORED
    """
    print(f"Procesando receta: {doc_id} - \"{migrator.get_display_name(data)}\"")

    try:
        patch = migrator.compute_patch(data)

        if not patch:
            print("  ⏭️  No requiere migración\n")
            return SKIPPED

        store.update(migrator.collection, doc_id, patch)
        print("  ✅ Actualizada correctamente\n")
        return UPDATED

    except Exception as e:
        print(f"  ❌ Error procesando receta {doc_id}: {e}", file=sys.stderr)
        print(
            f"     Datos: {json.dumps(data, indent=2, default=str, ensure_ascii=False)}\n",
            file=sys.stderr,
        )
        return ERRORED


def migrate_collection(store, collection_name, clock=None):
    """
    Orquesta la migración de una colección.

    Flujo:
    1. Cargar migrador específico (carga dinámica)
    2. Obtener snapshot completo (los errores aquí se propagan: son fatales)
    3. Procesar cada documento secuencialmente con migrate_document()
    4. Imprimir resumen

    Args:
        store: Instancia de BaseRecipeStore
        collection_name: Nombre de la colección a migrar
        clock: Reloj inyectable para updatedAt

    Returns:
        dict: {'total': int, 'updated': int, 'skipped': int, 'errors': int}
    """
    collection_config = config.get_collection_config(collection_name)

    print(f"\n🚀 Iniciando migración de colección '{collection_name}'...")
    print(f"   └─ {collection_config['description']}\n")

    migrator = load_migrator_for_collection(collection_name, clock=clock, verbose=True)

    docs = store.fetch_all(collection_name)
    print(f"📊 Encontradas {len(docs)} recetas para procesar\n")

    stats = {"total": len(docs), "updated": 0, "skipped": 0, "errors": 0}

    for doc_id, data in docs:
        outcome = migrate_document(store, migrator, doc_id, data)
        if outcome == UPDATED:
            stats["updated"] += 1
        elif outcome == SKIPPED:
            stats["skipped"] += 1
        else:
            stats["errors"] += 1

    print_summary(stats)
    return stats


def print_summary(stats):
    """Imprime resumen de la migración."""
    print("═" * 60)
    print("📈 Resumen de migración:")
    print(f"   Total recetas: {stats['total']}")
    print(f"   ✅ Actualizadas: {stats['updated']}")
    print(f"   ⏭️  Sin cambios: {stats['skipped']}")
    print(f"   ❌ Errores: {stats['errors']}")
    print("═" * 60)

    if stats["errors"] == 0:
        print("\n✨ Migración completada exitosamente!")
    else:
        print("\n⚠️  Migración completada con errores. Revisar arriba.")


def main():
    """
    Función principal que coordina el flujo completo de migración.

    Exit Codes:
        0: Éxito
        1: Error de conexión o de lectura de la colección
    """
    print("=" * 70)
    print("🚀 MIGRACIÓN DE ESQUEMA DE RECETAS")
    print("=" * 70)
    print(f"📍 Backend: {config.STORE_BACKEND}")
    print(f"📍 Proyecto: {config.GCP_PROJECT_ID}")

    store = connect_to_store()

    try:
        for collection_name in config.MIGRATION_ORDER:
            migrate_collection(store, collection_name)

    except Exception as e:
        print(f"\n💥 Error fatal durante la migración: {e}", file=sys.stderr)
        import traceback

        traceback.print_exc()
        sys.exit(1)

    finally:
        print("\n🔒 Cerrando conexión...")
        store.close()

    sys.exit(0)


if __name__ == "__main__":
    # Forzar UTF-8 en stdout/stderr para emojis en Windows
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8")
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding="utf-8")
    main()
