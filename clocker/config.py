import os
from os import path

import appdirs
import toml

from clocker.errors import ConfigError


DEFAULT_CONFIG_FILE = path.join(appdirs.user_config_dir('clocker', roaming=True), 'config.toml')

DEFAULT_CONFIG = {
    'timelog': {
        'file': '~/timelog.csv',
        'atomic_save': True,
        'strict_order': False,
    },
    'view': {
        'style': 'box',
    },
}


def load(file_name: str = DEFAULT_CONFIG_FILE):
    cfg = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
    try:
        user = toml.load(file_name)
    except FileNotFoundError:
        try:
            directory = path.dirname(file_name)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(file_name, 'w') as f:
                toml.dump(cfg, f)
        except OSError as e:
            raise ConfigError(file_name, e.strerror or e)
        return cfg
    except toml.TomlDecodeError as e:
        raise ConfigError(file_name, e)
    except OSError as e:
        raise ConfigError(file_name, e.strerror or e)

    for section, values in user.items():
        if isinstance(values, dict):
            cfg.setdefault(section, {}).update(values)
        else:
            cfg[section] = values
    return cfg
