"""
Funciones helper compartidas para todos los tests.

Proporciona:
- FakeRecipeStore: almacén en memoria que implementa BaseRecipeStore
- UnreachableRecipeStore: almacén cuyo ping() falla (error de conexión)
- Carga dinámica de migradores basándose en config.py
- Un runner mínimo para ejecutar los tests sin pytest
"""

import copy
import importlib
import os
import sys
from datetime import datetime, timezone

# Agregar directorio raíz al path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pymongo.errors import ServerSelectionTimeoutError

import config
from stores.base import BaseRecipeStore, DocumentNotFoundError

FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def fixed_clock():
    return FIXED_NOW


class FakeRecipeStore(BaseRecipeStore):
    """
    Almacén en memoria con semántica de merge igual a Firestore update().

    Args:
        collections: {'recipes': [(doc_id, data), ...]}
        fail_on_fetch: Excepción a lanzar en fetch_all/fetch_first
        fail_on_update: Set de doc_ids cuyo update falla
    """

    name = "fake"

    def __init__(self, collections=None, fail_on_fetch=None, fail_on_update=None):
        self.collections = {}
        for name, docs in (collections or {}).items():
            self.collections[name] = {
                doc_id: copy.deepcopy(data) for doc_id, data in docs
            }
        self.fail_on_fetch = fail_on_fetch
        self.fail_on_update = set(fail_on_update or [])
        self.updates = []
        self.closed = False

    def fetch_all(self, collection_name):
        if self.fail_on_fetch:
            raise self.fail_on_fetch
        docs = self.collections.get(collection_name, {})
        return [(doc_id, copy.deepcopy(data)) for doc_id, data in docs.items()]

    def fetch_first(self, collection_name):
        docs = self.fetch_all(collection_name)
        return docs[0] if docs else None

    def update(self, collection_name, doc_id, patch):
        if doc_id in self.fail_on_update:
            raise RuntimeError(f"write conflict on {doc_id}")
        docs = self.collections.get(collection_name, {})
        if doc_id not in docs:
            raise DocumentNotFoundError(f"no document {doc_id} in {collection_name}")
        self.updates.append((collection_name, doc_id, copy.deepcopy(patch)))
        docs[doc_id].update(copy.deepcopy(patch))

    def close(self):
        self.closed = True

    def get(self, collection_name, doc_id):
        return self.collections[collection_name][doc_id]


class UnreachableRecipeStore(BaseRecipeStore):
    """Almacén cuyo ping() falla como un servidor Mongo caído."""

    name = "unreachable"

    def ping(self):
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    def fetch_all(self, collection_name):
        return []

    def fetch_first(self, collection_name):
        return None

    def update(self, collection_name, doc_id, patch):
        pass


def apply_patch(doc, patch):
    """Merge de un patch sobre una copia del documento."""
    merged = copy.deepcopy(doc)
    merged.update(copy.deepcopy(patch))
    return merged


def get_migrator_class_for_collection(collection_name):
    """
    Carga dinámicamente la clase migrador para una colección.

    Sigue la convención de nombres:
    - recipes → RecipesMigrator (en migrators/recipes.py)
    """
    base_name = config.get_migrator_for_collection(collection_name)
    module = importlib.import_module(f"migrators.{base_name}")
    class_name = "".join(word.capitalize() for word in base_name.split("_")) + "Migrator"
    return getattr(module, class_name)


def get_all_migrator_classes():
    """
    Retorna lista de tuplas (nombre_clase, clase) para todos los migradores
    de config.MIGRATION_ORDER.
    """
    migradores = []

    for collection_name in config.MIGRATION_ORDER:
        migrator_class = get_migrator_class_for_collection(collection_name)
        migradores.append((migrator_class.__name__, migrator_class))

    return migradores


def run_test_functions(title, tests):
    """
    Ejecuta una lista de funciones de test y reporta fallos.

    Returns:
        bool: True si todos pasaron
    """
    print("=" * 70)
    print(f"🧪 {title}")
    print("=" * 70)

    failed = 0

    for test_func in tests:
        try:
            test_func()
            print(f"   ✅ {test_func.__name__}")
        except AssertionError as e:
            print(f"\n❌ FALLO: {test_func.__name__}")
            print(f"   {e}")
            failed += 1
        except Exception as e:
            print(f"\n❌ ERROR: {test_func.__name__}")
            print(f"   {type(e).__name__}: {e}")
            failed += 1

    print("\n" + "=" * 70)

    if failed == 0:
        print("✅ TODOS LOS TESTS PASARON")
    else:
        print(f"❌ {failed} TEST(S) FALLARON")

    return failed == 0
