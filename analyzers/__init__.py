"""
Scripts de solo lectura para inspeccionar la colección de recetas.
"""
