from typing import Dict, List, Tuple

from ..constants import NOTE
from ..fusion import FusionRecord
from ..util import logger


def score_sort_key(fusion: FusionRecord) -> int:
    """
    ranking used to pick the representative call, sort with reverse=True for best first
    """
    return fusion.score


def breakpoints_within_distance(
    first: FusionRecord, second: FusionRecord, distance: int
) -> bool:
    """
    True when both the left and right breakpoint positions of the two calls are within the distance
    """
    return (
        abs(first.break1.pos - second.break1.pos) <= distance
        and abs(first.break2.pos - second.break2.pos) <= distance
    )


def merge_novel_junction_variants(
    fusions: List[FusionRecord], aggregate_dist: int = 5
) -> Tuple[List[FusionRecord], List[FusionRecord]]:
    """
    collapse non-reference splice calls of the same fusion which are the same event called
    at slightly different breakpoint coordinates

    Calls are grouped by fusion name and each group is clustered greedily. The highest scoring
    call remaining (input order breaks ties) becomes the representative and absorbs every
    remaining call with both breakpoints within aggregate_dist of its own. Calls out of range
    of the representative are left for the following rounds. Membership is never re-tested
    against the absorbed calls, so chains of calls which are only close to their neighbours
    are not merged transitively

    Args:
        fusions: the fusion calls to merge
        aggregate_dist: the maximum distance between breakpoints of calls to be merged

    Returns:
        the calls which were kept (reference splice calls unchanged, followed by the
        representatives) and the calls which were merged into a representative
    """
    kept = []
    merged = []
    groups: Dict[str, List[FusionRecord]] = {}

    for fusion in fusions:
        if fusion.is_novel_splice:
            groups.setdefault(fusion.name, []).append(fusion)
        else:
            kept.append(fusion)

    for group in groups.values():
        remaining = sorted(group, key=score_sort_key, reverse=True)
        while remaining:
            representative = remaining.pop(0)
            unmatched = []
            for candidate in remaining:
                if breakpoints_within_distance(representative, candidate, aggregate_dist):
                    logger.debug(f'merging {candidate} into {representative}')
                    representative.merge(candidate)
                    candidate.filter_comment = NOTE.MERGED
                    merged.append(candidate)
                else:
                    unmatched.append(candidate)
            remaining = unmatched
            kept.append(representative)

    logger.info(
        f'merged {len(merged)} non-reference splice calls, {len(kept)} of {len(fusions)} calls remain'
    )
    return kept, merged
