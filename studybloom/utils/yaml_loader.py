"""
YAML loader utility for StudyBloom.

Loads bundled data files (preset courses, assistant suggestions) from
studybloom/data/.
"""

from pathlib import Path
from typing import Any
import yaml

from studybloom.config import DATA_DIR


def load_yaml_file(file_path: Path) -> Any:
    """
    Load a single YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Data file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_data(name: str, data_dir: Path | None = None) -> Any:
    """
    Load a data file by name.

    Args:
        name: File name without .yaml extension (e.g., "suggestions")
        data_dir: Optional custom data directory

    Returns:
        Parsed YAML content
    """
    dir_path = data_dir or DATA_DIR
    return load_yaml_file(dir_path / f"{name}.yaml")


def get_available_files(data_dir: Path | None = None) -> list[str]:
    """
    List YAML files in a directory, sorted by name.

    Returns:
        List of names (without .yaml extension)
    """
    dir_path = data_dir or DATA_DIR
    if not dir_path.exists():
        return []
    return sorted(p.stem for p in dir_path.glob("*.yaml"))
