import os
import time
from typing import Dict, List, Optional

from ..cluster.cluster import merge_novel_junction_variants
from ..external import ExternalFilter
from ..report import write_filter_outputs, write_final_outputs
from ..schemas import get_by_prefix
from ..util import generate_complete_stamp, logger, mkdirp, read_inputs
from .filter import filter_by_support, filter_minor_isoforms

SECTION = 'filter'


def main(
    inputs: List[str],
    output_prefix: str,
    config: Dict,
    genome_lib_dir: Optional[str] = None,
    start_time=int(time.time()),
    **kwargs,
) -> str:
    """
    Args:
        inputs: list of fusion candidate files to read
        output_prefix: the prefix (path and file name stem) of all output files
        config: the validated config
        genome_lib_dir: the genome library directory passed to the blast and promiscuity filter

    Returns:
        path to the final output file
    """
    if not config['external.skip_blast_filter'] and not genome_lib_dir:
        raise ValueError(
            'the genome library directory is required to run the blast and promiscuity filter'
        )
    header, fusions = read_inputs(inputs)
    filtered = []

    logger.info('merging non-reference splice calls')
    fusions, merged = merge_novel_junction_variants(
        fusions, aggregate_dist=config[f'{SECTION}.aggregate_novel_junction_dist']
    )

    fusions, failed = filter_by_support(
        fusions,
        min_junction_reads=config[f'{SECTION}.min_junction_reads'],
        min_sum_frags=config[f'{SECTION}.min_sum_frags'],
        min_novel_junction_support=config[f'{SECTION}.min_novel_junction_support'],
        require_long_double_anchor_support=config[
            f'{SECTION}.require_long_double_anchor_support'
        ],
    )
    filtered.extend(failed)

    fusions, failed = filter_minor_isoforms(
        fusions, min_alt_pct_junction=config[f'{SECTION}.min_alt_pct_junction']
    )
    filtered.extend(failed)

    if os.path.dirname(output_prefix):
        mkdirp(os.path.dirname(output_prefix))
    staging, _ = write_filter_outputs(
        output_prefix, header, retained=fusions, merged=merged, filtered=filtered
    )

    if config['external.skip_blast_filter']:
        logger.info('skipping the blast and promiscuity filter')
        final, _ = write_final_outputs(output_prefix, staging, move=False)
    else:
        options = get_by_prefix(config, 'external.')
        external = ExternalFilter(
            options['filter_command'],
            genome_lib_dir,
            max_promiscuity=options['max_promiscuity'],
            evalue_threshold=options['evalue_threshold'],
        )
        _, post_promiscuity = external.run(staging, output_prefix)
        final, _ = write_final_outputs(output_prefix, post_promiscuity)

    generate_complete_stamp(output_prefix, start_time=start_time)
    return final
