"""
Inspección rápida de la colección recipes.

Imprime el primer documento tal cual está en el almacén para revisar su
estructura antes (o después) de migrar.

Uso:
    python analyzers/inspect_recipe.py
"""

import io
import json
import sys
from pathlib import Path

# Rutas relativas al script
SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR.parent) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR.parent))

import config


def inspect_recipe(store, collection_name=config.RECIPES_COLLECTION):
    """
    Imprime id, nombre y estructura completa del primer documento.

    Returns:
        tuple | None: (doc_id, data) del documento impreso, o None si la
                      colección está vacía
    """
    first = store.fetch_first(collection_name)

    if first is None:
        print("No se encontraron recetas")
        return None

    doc_id, data = first
    print(f"ID de receta: {doc_id}")
    print(f"Nombre: {data.get('recipeName') or data.get('title')}")
    print("\nEstructura completa del documento:")
    print(json.dumps(data, indent=2, default=str, ensure_ascii=False))

    return first


def main():
    from recipemigra import connect_to_store

    store = connect_to_store()
    try:
        inspect_recipe(store)
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
    finally:
        store.close()


if __name__ == "__main__":
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8")
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding="utf-8")
    main()
