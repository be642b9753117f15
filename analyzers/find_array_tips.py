"""
Busca recetas con tips en formato array.

Los campos tips.makeAhead, tips.storage y tips.reheating deben ser texto en
el esquema actual. Este script recorre toda la colección y lista las
recetas que todavía los tienen como array (candidatas a recipemigra.py).

Uso:
    python analyzers/find_array_tips.py
"""

import io
import json
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR.parent) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR.parent))

import config
from migrators.recipes import TEXT_TIP_FIELDS


def find_array_tip_fields(data):
    """
    Retorna los campos de tips de texto que están guardados como array.

    Ejemplo:
        >>> find_array_tip_fields({'tips': {'storage': ['a', 'b']}})
        ['storage']
    """
    tips = data.get("tips")
    if not isinstance(tips, dict):
        return []
    return [field for field in TEXT_TIP_FIELDS if isinstance(tips.get(field), list)]


def find_array_tips(store, collection_name=config.RECIPES_COLLECTION):
    """
    Recorre la colección e imprime cada receta con tips en array.

    Returns:
        list: Tuplas (doc_id, nombre, campos_en_array)
    """
    print("🔍 Buscando recetas con tips en formato array...\n")

    docs = store.fetch_all(collection_name)

    if not docs:
        print("No se encontraron recetas")
        return []

    found = []

    for doc_id, data in docs:
        array_fields = find_array_tip_fields(data)
        if not array_fields:
            continue

        recipe_name = data.get("recipeName") or data.get("title")
        found.append((doc_id, recipe_name, array_fields))

        print(f"📋 Receta: {recipe_name} (ID: {doc_id})")
        for field in TEXT_TIP_FIELDS:
            kind = "ARRAY" if field in array_fields else "STRING"
            print(f"   {field}: {kind}")
        for field in array_fields:
            print(f"      Valor: {json.dumps(data['tips'][field], ensure_ascii=False)}")
        print()

    if not found:
        print("✅ Todas las recetas tienen tips en formato texto (no arrays)")
        print(f"   Total de recetas revisadas: {len(docs)}")

    return found


def main():
    from recipemigra import connect_to_store

    store = connect_to_store()
    try:
        find_array_tips(store)
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
    finally:
        store.close()


if __name__ == "__main__":
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8")
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding="utf-8")
    main()
