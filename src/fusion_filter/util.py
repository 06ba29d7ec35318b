import csv
import errno
import logging
import os
import time
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd
from mavis_config import bash_expands

from .constants import COLUMNS, COMMENT_PREFIX, REQUIRED_COLUMNS
from .error import InvalidFusionRecord
from .fusion import Breakpoint, FusionRecord, parse_read_names

logger = logging.getLogger('fusion_filter')


def filepath(path):
    try:
        file_list = bash_expands(path)
    except FileNotFoundError:
        raise TypeError('File does not exist', path)
    else:
        if not file_list:
            raise TypeError('File not found', path)
        elif len(file_list) > 1:
            raise TypeError('File pattern match multiple files and expected only one', path)
    return file_list[0]


def cast_boolean(input_value):
    value = str(input_value).lower()
    if value in ['t', 'true', '1', 'y', 'yes', '+']:
        return True
    elif value in ['f', 'false', '0', 'n', 'no', '-']:
        return False
    raise TypeError('casting to boolean failed', input_value)


def log_arguments(args):
    """
    output the arguments to the console

    Args:
        args (Namespace): the namespace to print arguments for
    """
    logger.info('arguments')

    indent = ' '

    for arg, val in sorted(args.__dict__.items()):
        if isinstance(val, list):
            if len(val) <= 1:
                logger.info(f'{indent}{arg} = {val}')
                continue
            logger.info(f'{indent}{arg} = [')
            for v in val:
                logger.info(f'{indent * 2}{repr(v)}')
            logger.info(f'{indent}]')
        elif any([isinstance(val, typ) for typ in [str, int, float, bool, tuple]]) or val is None:
            logger.info(f'{indent}{arg}= {repr(val)}')
        else:
            logger.info(f'{arg} = {object.__repr__(val)}')


def mkdirp(dirname):
    """
    Make a directory or path of directories. Suppresses the error that is normally raised when the directory already exists
    """
    logger.info(f"creating output directory: '{dirname}'")
    try:
        os.makedirs(dirname)
    except OSError as exc:
        if exc.errno == errno.EEXIST and os.path.isdir(dirname):
            pass
        else:
            raise exc
    return dirname


def _read_tabbed_file(filename: str) -> pd.DataFrame:
    """
    read a tab delimited file keeping every value as the literal string from the file
    """
    try:
        return pd.read_csv(
            filename,
            sep='\t',
            dtype=str,
            na_filter=False,
            quoting=csv.QUOTE_NONE,
        )
    except pd.errors.EmptyDataError:
        raise InvalidFusionRecord('input file is empty, a header row is required', filename)
    except pd.errors.ParserError as err:
        raise InvalidFusionRecord(f'could not parse the tab delimited file: {err}', filename)


def _parse_count(value, column: str) -> int:
    try:
        count = int(value)
    except (TypeError, ValueError):
        raise InvalidFusionRecord(f'expected an integer for {column}', value)
    if count < 0:
        raise InvalidFusionRecord(f'{column} cannot be negative', value)
    return count


def convert_row(row: Dict[str, str], line_no: int) -> FusionRecord:
    """
    converts a row of the fusion candidates file to a fusion record. Any columns which are not
    used by the filter are stored in the data attribute of the record
    """
    for col in REQUIRED_COLUMNS:
        if pd.isnull(row[col]):
            raise InvalidFusionRecord(f'line {line_no}: missing value for column {col}')
    name = row[COLUMNS.fusion_name].strip()
    if not name:
        raise InvalidFusionRecord(f'line {line_no}: the fusion name cannot be empty')
    splice_type = row[COLUMNS.splice_type]
    try:
        fusion = FusionRecord(
            name,
            Breakpoint.parse(row[COLUMNS.break1]),
            Breakpoint.parse(row[COLUMNS.break2]),
            splice_type=splice_type,
            junction_reads=parse_read_names(row[COLUMNS.junction_reads]),
            spanning_frags=parse_read_names(row[COLUMNS.spanning_frags]),
            junction_read_count=_parse_count(
                row[COLUMNS.junction_read_count], COLUMNS.junction_read_count
            ),
            spanning_frag_count=_parse_count(
                row[COLUMNS.spanning_frag_count], COLUMNS.spanning_frag_count
            ),
            large_anchor_support=row[COLUMNS.large_anchor_support],
            gene1=row[COLUMNS.gene1],
            gene2=row[COLUMNS.gene2],
            line_no=line_no,
            **{k: v for k, v in row.items() if k not in REQUIRED_COLUMNS},
        )
    except KeyError:
        raise InvalidFusionRecord(
            f'line {line_no}: unexpected value for column {COLUMNS.splice_type}', splice_type
        )
    except InvalidFusionRecord as err:
        raise InvalidFusionRecord(f'line {line_no}:', *err.args)
    return fusion


def read_fusion_file(filename: str) -> Tuple[List[str], List[FusionRecord]]:
    """
    reads a file of fusion candidates. Each row is converted to a fusion record and the other
    column data is stored in the data attribute

    Args:
        filename: path to the input file

    Returns:
        the header (column names in the order they were read) and the list of fusions

    Raises:
        KeyError: a required column is missing
        InvalidFusionRecord: the file or one of its rows is malformed
    """
    df = _read_tabbed_file(filename)

    for col in REQUIRED_COLUMNS:
        if col not in df:
            raise KeyError(f'missing required column: {col}')

    fusions = []
    for row_index, row in enumerate(df.to_dict('records')):
        line_no = row_index + 2  # header is line 1
        if str(row[COLUMNS.fusion_name]).startswith(COMMENT_PREFIX):
            logger.debug(f'skipping commented row on line {line_no}')
            continue
        fusions.append(convert_row(row, line_no))
    return list(df.columns), fusions


def read_inputs(inputs: List[str]) -> Tuple[List[str], List[FusionRecord]]:
    header: Optional[List[str]] = None
    fusions = []

    for finput in bash_expands(*inputs):
        logger.info(f'loading: {finput}')
        current_header, current_fusions = read_fusion_file(finput)
        if header is None:
            header = current_header
        elif current_header != header:
            raise InvalidFusionRecord(
                'all input files must share the same columns', finput, current_header, header
            )
        fusions.extend(current_fusions)
    logger.info(f'loaded {len(fusions)} fusion candidates')
    return header or list(REQUIRED_COLUMNS), fusions


def write_tabbed_file(rows: Iterable[Dict], filename: str, header: List[str]) -> None:
    """
    write rows to a tab delimited file. Values are written as-is (no quoting) so that
    passthrough columns are reproduced exactly
    """
    logger.info(f'writing: {filename}')
    with open(filename, 'w') as fh:
        fh.write('\t'.join(header) + '\n')
        for row in rows:
            fh.write('\t'.join([str(row.get(col, '')) for col in header]) + '\n')


def abridge_tabbed_file(inputfile: str, outputfile: str, exclude: Iterable[str]) -> List[str]:
    """
    copy a tab delimited file without the excluded columns. Excluded columns which are not
    present in the input are ignored

    Returns:
        the columns which were written
    """
    df = _read_tabbed_file(inputfile)
    exclude = set(exclude)
    header = [col for col in df.columns if col not in exclude]
    write_tabbed_file(df.to_dict('records'), outputfile, header=header)
    return header


def generate_complete_stamp(output_prefix: str, start_time: Optional[int] = None) -> str:
    """
    writes a complete stamp, optionally including the run time if start_time is given

    Args:
        output_prefix: the prefix of the output files the stamp belongs to
        start_time: the start time

    Return:
        path to the complete stamp

    Example:
        >>> generate_complete_stamp('some_output_dir/sample')
        'some_output_dir/sample.COMPLETE'
    """
    stamp = str(output_prefix) + '.COMPLETE'
    logger.info(f'complete: {stamp}')
    with open(stamp, 'w') as fh:
        if start_time is not None:
            duration = int(time.time()) - start_time
            hours = duration - duration % 3600
            minutes = duration - hours - (duration - hours) % 60
            seconds = duration - hours - minutes
            fh.write(
                'run time (hh/mm/ss): {}:{:02d}:{:02d}\n'.format(
                    hours // 3600, minutes // 60, seconds
                )
            )
            fh.write('run time (s): {}\n'.format(duration))
    return stamp
