from pathlib import Path

import yaml

from redirector.components.redirects import Configuration, InvalidConfig, validate


def load_config(path: Path) -> Configuration:
    """
    Load and validate the redirect configuration file.
    Raises FileNotFoundError if file missing.
    Raises MissingDestination if the file has no destination.
    Raises InvalidConfig if the YAML or any other field is malformed.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise InvalidConfig(f"invalid YAML syntax in {path}: {e}") from e

    return validate(data)
