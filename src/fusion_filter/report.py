"""
writes the outputs of the filter: the pre-filter staging file, the audit of every input call and
the final (post blast and promiscuity filter) files
"""
import os
import shutil
from typing import Dict, List, Tuple

from .constants import ABRIDGED_EXCLUDE_COLUMNS, COLUMNS, COMMENT_PREFIX, NOTE
from .fusion import FusionRecord
from .util import abridge_tabbed_file, logger, write_tabbed_file

STAGING_SUFFIX = '.pre_blast_filter'
AUDIT_SUFFIX = STAGING_SUFFIX + '.filt_info'
ABRIDGED_SUFFIX = '.abridged'
FINAL_SUFFIX = '.final'


def audit_row(fusion: FusionRecord, note: str, commented: bool = True) -> Dict[str, str]:
    """
    row of the audit file for a single call. Calls which were not retained are commented out
    (the fusion name is prefixed) so that they are skipped when the file is re-read
    """
    row = fusion.flatten(name_prefix=COMMENT_PREFIX if commented else '')
    row[COLUMNS.note] = note
    return row


def write_audit_file(
    filename: str,
    header: List[str],
    retained: List[FusionRecord],
    merged: List[FusionRecord],
    filtered: List[FusionRecord],
) -> None:
    """
    Args:
        filename: path to the audit file
        header: the columns of the input file
        retained: calls passing all filters
        merged: calls merged into another call
        filtered: calls removed by a filter, in the order they were removed
    """
    rows = []
    for fusion in merged:
        rows.append(audit_row(fusion, NOTE.MERGED))
    for fusion in filtered:
        rows.append(audit_row(fusion, fusion.filter_comment))
    for fusion in retained:
        rows.append(audit_row(fusion, NOTE.RETAINED, commented=False))
    header = [col for col in header if col != COLUMNS.note] + [COLUMNS.note]
    write_tabbed_file(rows, filename, header=header)


def write_filter_outputs(
    output_prefix: str,
    header: List[str],
    retained: List[FusionRecord],
    merged: List[FusionRecord],
    filtered: List[FusionRecord],
) -> Tuple[str, str]:
    """
    write the staging file (the calls passed to the blast and promiscuity filter) and the audit file

    Returns:
        the paths to the staging and audit files
    """
    staging = output_prefix + STAGING_SUFFIX
    audit = output_prefix + AUDIT_SUFFIX

    write_tabbed_file([fusion.flatten() for fusion in retained], staging, header=header)
    abridge_tabbed_file(staging, staging + ABRIDGED_SUFFIX, ABRIDGED_EXCLUDE_COLUMNS)
    write_audit_file(audit, header, retained=retained, merged=merged, filtered=filtered)
    logger.info(
        f'retained {len(retained)} calls, merged {len(merged)} calls, filtered {len(filtered)} calls'
    )
    return staging, audit


def write_final_outputs(output_prefix: str, final_source: str, move: bool = True) -> Tuple[str, str]:
    """
    relocate the output of the last filtering stage to the final output file and write its
    abridged version

    Args:
        output_prefix: the prefix for all output files
        final_source: the path to the output of the last filtering stage
        move: move the file instead of copying it

    Returns:
        the paths to the final and abridged final files
    """
    final = output_prefix + FINAL_SUFFIX
    if os.path.abspath(final_source) != os.path.abspath(final):
        if move:
            logger.info(f'moving: {final_source} to {final}')
            shutil.move(final_source, final)
        else:
            logger.info(f'copying: {final_source} to {final}')
            shutil.copyfile(final_source, final)
    abridged = final + ABRIDGED_SUFFIX
    abridge_tabbed_file(final, abridged, ABRIDGED_EXCLUDE_COLUMNS)
    return final, abridged
