"""
Run configuration.

A YAML file with two optional keys:

    bound: 10000    # sieve [2, bound)
    packed: false   # use the bit-set sieve

With no file, the hardcoded defaults apply.
"""

from pathlib import Path
from typing import Optional, Union

import yaml

DEFAULT_BOUND = 10000

DEFAULTS = {
    'bound': DEFAULT_BOUND,
    'packed': False,
}


def load_config(path: Optional[Union[str, Path]] = None) -> dict:
    """
    Load a run config, filling missing keys from DEFAULTS.

    Parameters
    ----------
    path : str or Path, optional
        YAML file. None means defaults only.

    Returns
    -------
    dict
        Keys 'bound' (int) and 'packed' (bool).
    """
    config = dict(DEFAULTS)
    if path is None:
        return config

    with open(path) as f:
        try:
            loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: invalid YAML: {e}") from e

    # empty file
    if loaded is None:
        loaded = {}

    if not isinstance(loaded, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(loaded).__name__}")

    unknown = set(loaded) - set(DEFAULTS)
    if unknown:
        raise ValueError(f"{path}: unknown config keys {sorted(unknown, key=str)}")

    config.update(loaded)

    if isinstance(config['bound'], bool) or not isinstance(config['bound'], int):
        raise ValueError(f"{path}: bound must be an integer, got {config['bound']!r}")
    if not isinstance(config['packed'], bool):
        raise ValueError(f"{path}: packed must be true or false, got {config['packed']!r}")

    return config
