import argparse
import json
from typing import Dict, Optional

from .schemas import ImmutableDict, load_schema, validate_config
from .util import cast_boolean, filepath, logger

SCHEMA_TYPES = {'integer': int, 'number': float, 'boolean': cast_boolean, 'string': str}


class CustomHelpFormatter(argparse.ArgumentDefaultsHelpFormatter):
    """
    subclass the default help formatter to stop default printing for required arguments
    """

    def _format_args(self, action, default_metavar):
        if action.metavar is None:
            action.metavar = get_metavar(action.type)
        return super(CustomHelpFormatter, self)._format_args(action, default_metavar)

    def _get_help_string(self, action):
        if action.required:
            return action.help
        return super(CustomHelpFormatter, self)._get_help_string(action)

    def add_arguments(self, actions):
        # sort the arguments alphanumerically so they print in the help that way
        actions = sorted(actions, key=lambda x: getattr(x, 'option_strings'))
        super(CustomHelpFormatter, self).add_arguments(actions)


def get_metavar(arg_type):
    """
    For a given argument type, returns the string to be used for the metavar argument in add_argument

    Example:
        >>> get_metavar(bool)
        '{True,False}'
    """
    if arg_type in [bool, cast_boolean]:
        return '{True,False}'
    elif arg_type == float:
        return 'FLOAT'
    elif arg_type == int:
        return 'INT'
    elif arg_type == filepath:
        return 'FILEPATH'
    return None


def option_name(key: str) -> str:
    """
    Example:
        >>> option_name('filter.min_junction_reads')
        'min_junction_reads'
    """
    return key.split('.', 1)[-1]


def add_config_arguments(parser: argparse._ActionsContainer) -> None:
    """
    add a command line flag for each option in the config schema. Flags are only set on the
    namespace when given so that they can be told apart from the config file values
    """
    for key, schema in sorted(load_schema()['properties'].items()):
        parser.add_argument(
            '--' + option_name(key),
            dest=option_name(key),
            type=SCHEMA_TYPES[schema['type']],
            default=argparse.SUPPRESS,
            help='{} (default: {})'.format(schema.get('description', ''), schema.get('default')),
        )


def build_config(
    config_file: Optional[str] = None, overrides: Optional[Dict] = None
) -> ImmutableDict:
    """
    combine the schema defaults, the JSON config file and the command line overrides (in that
    order of precedence, lowest first) and validate the result

    Args:
        config_file: path to the JSON config file
        overrides: values by option name (see option_name) or full config key
    """
    config: Dict = {}
    if config_file:
        logger.info(f'loading config: {config_file}')
        with open(config_file, 'r') as fh:
            config.update(json.load(fh))

    keys_by_option = {option_name(key): key for key in load_schema()['properties']}
    for option, value in (overrides or {}).items():
        config[keys_by_option.get(option, option)] = value
    return validate_config(config)
