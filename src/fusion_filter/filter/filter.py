from typing import Dict, List, Optional, Tuple

from ..fusion import FusionRecord
from ..util import logger


def check_support(
    fusion: FusionRecord,
    min_junction_reads: int = 1,
    min_sum_frags: int = 2,
    min_novel_junction_support: int = 3,
    require_long_double_anchor_support: bool = False,
) -> Optional[str]:
    """
    Checks the evidence of a single fusion call. The checks are applied in order and the first
    one which fails is reported

    Returns:
        the reason the fusion fails or None if it has sufficient support
    """
    if fusion.total_support < min_sum_frags:
        return 'insufficient total support: junction reads + spanning fragments ({}) < min_sum_frags ({})'.format(
            fusion.total_support, min_sum_frags
        )
    if fusion.is_novel_splice and fusion.junction_read_count < min_novel_junction_support:
        return 'insufficient novel-junction support: non-reference splice with junction reads ({}) < min_novel_junction_support ({})'.format(
            fusion.junction_read_count, min_novel_junction_support
        )
    if fusion.junction_read_count < min_junction_reads:
        return 'insufficient junction-read support: junction reads ({}) < min_junction_reads ({})'.format(
            fusion.junction_read_count, min_junction_reads
        )
    if (
        fusion.spanning_frag_count == 0
        and require_long_double_anchor_support
        and not fusion.has_long_double_anchor_support
    ):
        return 'no spanning support and no anchor support: spanning fragments (0) and large anchor support ({})'.format(
            fusion.large_anchor_support
        )
    return None


def filter_by_support(
    fusions: List[FusionRecord],
    min_junction_reads: int = 1,
    min_sum_frags: int = 2,
    min_novel_junction_support: int = 3,
    require_long_double_anchor_support: bool = False,
) -> Tuple[List[FusionRecord], List[FusionRecord]]:
    """
    filter the fusion calls on the minimum evidence levels (see check_support)

    Returns:
        the calls which passed and the calls which failed. The reason is stored as the filter
        comment of each failed call
    """
    passed = []
    failed = []
    for fusion in fusions:
        reason = check_support(
            fusion,
            min_junction_reads=min_junction_reads,
            min_sum_frags=min_sum_frags,
            min_novel_junction_support=min_novel_junction_support,
            require_long_double_anchor_support=require_long_double_anchor_support,
        )
        if reason:
            fusion.filter_comment = reason
            failed.append(fusion)
        else:
            passed.append(fusion)
    logger.info(
        f'filtered from {len(fusions)} down to {len(passed)} on read support (removed {len(failed)})'
    )
    return passed, failed


def isoform_sort_key(fusion: FusionRecord) -> Tuple[int, int]:
    """
    ranking of the isoforms of a fusion, sort with reverse=True for best first
    """
    return (fusion.junction_read_count, fusion.spanning_frag_count)


def filter_minor_isoforms(
    fusions: List[FusionRecord], min_alt_pct_junction: float = 10
) -> Tuple[List[FusionRecord], List[FusionRecord]]:
    """
    Remove isoforms of a fusion carrying only a small fraction of the junction reads of the
    dominant isoform

    All calls are ranked together by (junction reads, spanning fragments), best first with ties
    kept in input order. The first call seen for a fusion name is the dominant isoform and is
    always kept. Any later call of the same name is removed when its junction reads are less
    than min_alt_pct_junction percent of the dominant isoform's. If the dominant isoform has
    no junction reads the percentage is not computed and the call is kept

    Returns:
        the calls which passed (in ranked order) and the calls which failed
    """
    passed = []
    failed = []
    dominant_support: Dict[str, Optional[int]] = {}

    for fusion in sorted(fusions, key=isoform_sort_key, reverse=True):
        if fusion.name not in dominant_support:
            dominant_support[fusion.name] = (
                fusion.junction_read_count if fusion.junction_read_count > 0 else None
            )
            passed.append(fusion)
            continue
        dominant = dominant_support[fusion.name]
        if not dominant:
            passed.append(fusion)
            continue
        pct = fusion.junction_read_count / dominant * 100
        if pct < min_alt_pct_junction:
            fusion.filter_comment = 'minor isoform: junction reads are {:.2f}% of the dominant isoform ({}) < min_alt_pct_junction ({}%)'.format(
                pct, dominant, min_alt_pct_junction
            )
            failed.append(fusion)
        else:
            passed.append(fusion)
    logger.info(
        f'filtered from {len(fusions)} down to {len(passed)} on dominant isoform support (removed {len(failed)})'
    )
    return passed, failed
