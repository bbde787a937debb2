# API pública del dominio catalogo

from .modelos import CatalogoError, ConductorSpec, Material, MetodoInstalacion

from .catalogo import (
    ConductorCatalog,
    all_sizes,
    ampacity_for,
    catalogo_desde_tablas,
    default_catalog,
)
from .catalogo_yaml import cargar_conductores_yaml

__all__ = [
    # modelos
    "CatalogoError",
    "ConductorSpec",
    "Material",
    "MetodoInstalacion",

    # catálogo
    "ConductorCatalog",
    "all_sizes",
    "ampacity_for",
    "catalogo_desde_tablas",
    "default_catalog",
    "cargar_conductores_yaml",
]
