"""
Runner principal de tests.

Ejecuta todos los tests en orden lógico y reporta resultados consolidados.
Alternativa a pytest para entornos sin dependencias de test instaladas.

Uso:
    python tests/run_tests.py
"""

import os
import sys

# Agregar tests y raíz al path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from test_syntax import check_syntax
from test_config import run_all_tests as test_config
from test_migrator_interface import run_all_tests as test_interface
from test_recipes_migrator import run_all_tests as test_rules
from test_recipemigra import run_all_tests as test_runner
from test_analyzers import run_all_tests as test_analyzers
from test_stores import run_all_tests as test_stores


def main():
    """
    Ejecuta suite completa de tests.

    Orden de ejecución:
    1. Sintaxis (si falla aquí, no tiene sentido continuar)
    2. Configuración e interfaces
    3. Reglas de transformación
    4. Orquestador, analyzers y almacenes
    """
    print("=" * 70)
    print("🚀 INICIANDO SUITE DE TESTS")
    print("=" * 70)

    results = {}

    print("\n" + "=" * 70)
    print("📝 FASE 1: VALIDACIÓN DE SINTAXIS")
    print("=" * 70)
    success, errors = check_syntax()
    results["syntax"] = success

    if not success:
        print("\n⚠️  Errores de sintaxis detectados. Corregir antes de continuar.")
        print_summary(results)
        return False

    print("\n" + "=" * 70)
    print("🔌 FASE 2: CONFIGURACIÓN E INTERFAZ")
    print("=" * 70)
    results["config"] = test_config()
    results["interface"] = test_interface()

    print("\n" + "=" * 70)
    print("🧮 FASE 3: REGLAS DE MIGRACIÓN")
    print("=" * 70)
    results["rules"] = test_rules()

    print("\n" + "=" * 70)
    print("🗄️  FASE 4: ORQUESTADOR Y ALMACENES")
    print("=" * 70)
    results["runner"] = test_runner()
    results["analyzers"] = test_analyzers()
    results["stores"] = test_stores()

    print_summary(results)

    return all(results.values())


def print_summary(results):
    """Imprime resumen de resultados de tests."""
    print("\n" + "=" * 70)
    print("📊 RESUMEN DE TESTS")
    print("=" * 70)

    for test_name, passed in results.items():
        status = "✅ PASS" if passed else "❌ FAIL"
        print(f"   {status}  {test_name.capitalize()}")

    print("=" * 70)

    if all(results.values()):
        print("✅ TODOS LOS TESTS PASARON - Sistema listo para migración")
    else:
        print("❌ HAY TESTS FALLANDO - Corregir antes de migrar")

    print("=" * 70)


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
