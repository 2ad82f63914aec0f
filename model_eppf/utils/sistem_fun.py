# sistem_fun.py
"""
Módulo de utilidades del sistema para el proyecto model_eppf.
Proporciona funciones para manejo de rutas y configuración.
"""

import yaml
from pathlib import Path


def get_project_root():
    """
    Encuentra la raíz del proyecto buscando el archivo pyproject.toml.

    Returns:
        Path: Ruta absoluta a la raíz del proyecto
    """
    current = Path(__file__).resolve()

    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            return parent

    # model_eppf/utils/sistem_fun.py -> project_root/
    return current.parent.parent.parent


def load_config(config_path=None):
    """
    Carga la configuración del proyecto desde config.yaml.

    Args:
        config_path (str|Path, optional): Ruta al archivo de configuración.
                                         Si es None, busca en versioning/config.yaml

    Returns:
        dict: Diccionario con la configuración del proyecto

    Raises:
        FileNotFoundError: Si no se encuentra el archivo de configuración
        yaml.YAMLError: Si el archivo no es YAML válido
    """
    if config_path is None:
        project_root = get_project_root()
        config_path = project_root / "versioning" / "config.yaml"
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(
            f"No se encontró el archivo de configuración en: {config_path}\n"
            f"Asegúrate de que existe versioning/config.yaml en la raíz del proyecto."
        )

    with open(config_path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)

    return config or {}


def get_report_path(config, report_type="graphics"):
    """
    Obtiene la ruta de reportes según el tipo especificado.

    Args:
        config (dict): Diccionario de configuración
        report_type (str): "graphics" o "tables"

    Returns:
        Path: Ruta absoluta al directorio de reportes (se crea si no existe)

    Raises:
        ValueError: Si report_type no es válido
        KeyError: Si la configuración no contiene reports.<report_type>

    Example:
        >>> config = load_config()
        >>> path = get_report_path(config, "graphics")
        >>> print(path)  # /path/to/project/reports/graphics
    """
    if report_type not in ("graphics", "tables"):
        raise ValueError(f"report_type debe ser 'graphics' o 'tables', se recibió {report_type!r}")

    relative_path = Path(config['reports'][report_type])
    if relative_path.is_absolute():
        report_path = relative_path
    else:
        report_path = get_project_root() / str(relative_path).lstrip('../')

    report_path.mkdir(parents=True, exist_ok=True)

    return report_path
