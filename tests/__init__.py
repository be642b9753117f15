"""
Suite de tests para el sistema de migración de recetas.

Los tests NO se conectan a ningún almacén real, solo validan:
- Sintaxis de código Python
- Configuración e interfaces de migradores
- Reglas de transformación sobre documentos en memoria
- Recorrido, conteo y manejo de errores de recipemigra.py
"""
