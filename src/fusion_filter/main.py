#!python
import argparse
import logging
import os
import platform
import sys
import time
from typing import List, Optional

from mavis_config import bash_expands

from . import __version__
from . import config as _config
from . import util as _util
from .constants import ABRIDGED_EXCLUDE_COLUMNS, PROGNAME, SUBCOMMAND
from .filter import main as filter_main
from .util import filepath


def abridge_main(inputs: List[str], outputfile: str, exclude: List[str]):
    if os.path.dirname(outputfile):
        _util.mkdirp(os.path.dirname(outputfile))
    header = _util.abridge_tabbed_file(inputs[0], outputfile, exclude)
    _util.logger.info(f'wrote {len(header)} columns to {outputfile}')


def create_parser(argv):
    parser = argparse.ArgumentParser(formatter_class=_config.CustomHelpFormatter)
    parser.add_argument(
        '-v',
        '--version',
        action='version',
        version='%(prog)s version ' + __version__,
        help='Outputs the version number',
    )
    subp = parser.add_subparsers(
        dest='command', help='specifies which step/stage in the pipeline or which subprogram to use'
    )
    subp.required = True
    required = {}  # hold required argument group by subparser command name
    optional = {}  # hold optional argument group by subparser command name
    for command in SUBCOMMAND.values():
        subparser = subp.add_parser(
            command, formatter_class=_config.CustomHelpFormatter, add_help=False
        )
        required[command] = subparser.add_argument_group('required arguments')
        optional[command] = subparser.add_argument_group('optional arguments')
        optional[command].add_argument(
            '-h', '--help', action='help', help='show this help message and exit'
        )
        optional[command].add_argument(
            '-v',
            '--version',
            action='version',
            version='%(prog)s version ' + __version__,
            help='Outputs the version number',
        )
        optional[command].add_argument('--log', help='redirect stdout to a log file', default=None)
        optional[command].add_argument(
            '--log_level',
            help='level of logging to output',
            choices=['INFO', 'DEBUG'],
            default='INFO',
        )
        required[command].add_argument(
            '-n',
            '--inputs',
            nargs='+',
            help='path to the input files',
            required=True,
            metavar='FILEPATH',
        )

    # filter
    required[SUBCOMMAND.FILTER].add_argument(
        '-o',
        '--output_prefix',
        required=True,
        help='prefix (directory and file name stem) of the output files',
    )
    optional[SUBCOMMAND.FILTER].add_argument(
        '--config', '-c', help='path to the JSON config file', type=filepath, default=None
    )
    optional[SUBCOMMAND.FILTER].add_argument(
        '--genome_lib_dir',
        '-l',
        help='path to the genome library directory (required unless the blast filter is skipped)',
        default=None,
    )
    config_group = subp.choices[SUBCOMMAND.FILTER].add_argument_group('config options')
    _config.add_config_arguments(config_group)

    # abridge
    required[SUBCOMMAND.ABRIDGE].add_argument(
        '--outputfile', '-o', required=True, help='path to the outputfile', metavar='FILEPATH'
    )
    optional[SUBCOMMAND.ABRIDGE].add_argument(
        '--exclude',
        nargs='+',
        default=ABRIDGED_EXCLUDE_COLUMNS,
        help='names of the columns to drop',
    )

    return parser, parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """
    sets up the parser and checks the validity of command line args
    loads the config and redirects into subcommand main functions

    Args:
        argv: List of arguments, defaults to command line arguments
    """
    if argv is None:  # need to do at run time or patching will not behave as expected
        argv = sys.argv[1:]
    start_time = int(time.time())
    parser, args = create_parser(argv)

    log_conf = {
        'format': '{asctime} [{levelname}] {message}',
        'style': '{',
        'level': args.log_level,
    }

    original_logging_handlers = logging.root.handlers[:]
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    if args.log:  # redirect stdout AND stderr to a log file
        log_conf['filename'] = args.log
    logging.basicConfig(**log_conf)

    _util.logger.info(f'{PROGNAME}: {__version__}')
    _util.logger.info(f'hostname: {platform.node()}')
    _util.log_arguments(args)

    # try checking the input files exist
    try:
        args.inputs = bash_expands(*args.inputs)
    except FileNotFoundError:
        parser.error('--inputs file(s) for {} {} do not exist'.format(args.command, args.inputs))

    command = args.command

    try:
        if command == SUBCOMMAND.FILTER:
            overrides = {
                _config.option_name(key): getattr(args, _config.option_name(key))
                for key in _config.load_schema()['properties']
                if hasattr(args, _config.option_name(key))
            }
            config = _config.build_config(args.config, overrides)
            if not config['external.skip_blast_filter']:
                if not args.genome_lib_dir:
                    parser.error(
                        '--genome_lib_dir is required unless --skip_blast_filter is set'
                    )
                elif not os.path.isdir(args.genome_lib_dir):
                    parser.error(f'--genome_lib_dir {args.genome_lib_dir} is not a directory')
            filter_main.main(
                inputs=args.inputs,
                output_prefix=args.output_prefix,
                config=config,
                genome_lib_dir=args.genome_lib_dir,
                start_time=start_time,
            )
        else:
            if len(args.inputs) != 1:
                parser.error(f'{command} expects a single input file: {args.inputs}')
            abridge_main(args.inputs, args.outputfile, args.exclude)

        duration = int(time.time()) - start_time
        hours = duration - duration % 3600
        minutes = duration - hours - (duration - hours) % 60
        seconds = duration - hours - minutes
        _util.logger.info(
            'run time (hh/mm/ss): {}:{:02d}:{:02d}'.format(hours // 3600, minutes // 60, seconds)
        )
        _util.logger.info(f'run time (s): {duration}')
    finally:
        try:
            for handler in logging.root.handlers[:]:
                logging.root.removeHandler(handler)
            for handler in original_logging_handlers:
                logging.root.addHandler(handler)
        except Exception as err:
            print(err)


if __name__ == '__main__':
    main()
