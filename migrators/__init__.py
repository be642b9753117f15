"""
Migradores de esquema para colecciones de documentos.

Cada migrador implementa la interfaz BaseMigrator y se carga dinámicamente
en runtime según la colección seleccionada.

Estructura:
    base.py: Clase abstracta BaseMigrator
    recipes.py: Migrador para la colección recipes

Los migradores son instanciados por load_migrator_for_collection() en
recipemigra.py usando importlib.import_module() para carga dinámica.

Interfaz requerida (ver BaseMigrator):
    - compute_patch(doc)
    - get_display_name(doc)
"""
