import collections.abc
import json
import os
from typing import Dict

from snakemake.utils import validate as snakemake_validate

CONFIG_SCHEMA = os.path.join(os.path.dirname(__file__), 'config.json')


class ImmutableDict(collections.abc.Mapping):
    def __init__(self, data):
        self._data = data

    def __getitem__(self, key):
        return self._data[key]

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __repr__(self):
        return 'ImmutableDict({})'.format(self._data)


def get_by_prefix(config, prefix):
    return {k.replace(prefix, ''): v for k, v in config.items() if k.startswith(prefix)}


def load_schema() -> Dict:
    with open(CONFIG_SCHEMA, 'r') as fh:
        return json.load(fh)


def validate_config(config: Dict) -> ImmutableDict:
    """
    check the config against the schema and fill in the default value of any missing options

    Raises:
        snakemake.exceptions.WorkflowError: the config does not conform to the schema
    """
    config = dict(config)
    snakemake_validate(config, CONFIG_SCHEMA, set_default=True)
    return ImmutableDict(config)
