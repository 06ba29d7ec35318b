from fusion_filter.cluster.cluster import (
    breakpoints_within_distance,
    merge_novel_junction_variants,
)
from fusion_filter.constants import NOTE, SPLICE_TYPE

from ..mock import mock_fusion

NON_REF = SPLICE_TYPE.NON_REF


class TestBreakpointsWithinDistance:
    def test_both_within(self):
        assert breakpoints_within_distance(
            mock_fusion(pos1=100, pos2=500), mock_fusion(pos1=105, pos2=495), 5
        )

    def test_one_outside(self):
        assert not breakpoints_within_distance(
            mock_fusion(pos1=100, pos2=500), mock_fusion(pos1=100, pos2=506), 5
        )


class TestMergeNovelJunctionVariants:
    def test_nearby_calls_merged(self):
        first = mock_fusion(junction=3, spanning=1, pos1=100, pos2=500, splice_type=NON_REF)
        second = mock_fusion(junction=2, spanning=2, pos1=102, pos2=503, splice_type=NON_REF)
        kept, merged = merge_novel_junction_variants([first, second], aggregate_dist=5)
        assert kept == [first]
        assert merged == [second]
        assert first.junction_read_count == 5
        assert first.spanning_frag_count == 3
        assert first.break1.pos == 100
        assert second.filter_comment == NOTE.MERGED

    def test_highest_score_is_representative(self):
        weak = mock_fusion(junction=1, spanning=1, pos1=100, splice_type=NON_REF)
        strong = mock_fusion(junction=5, spanning=0, pos1=103, splice_type=NON_REF)
        kept, merged = merge_novel_junction_variants([weak, strong])
        assert kept == [strong]
        assert merged == [weak]
        assert strong.break1.pos == 103

    def test_tie_keeps_input_order(self):
        first = mock_fusion(junction=2, spanning=1, pos1=100, splice_type=NON_REF)
        second = mock_fusion(junction=2, spanning=1, pos1=101, splice_type=NON_REF)
        kept, merged = merge_novel_junction_variants([first, second])
        assert kept == [first]
        assert merged == [second]

    def test_reference_splice_unchanged(self):
        ref1 = mock_fusion(junction=3, pos1=100)
        ref2 = mock_fusion(junction=3, pos1=101)
        novel = mock_fusion(junction=3, pos1=102, splice_type=NON_REF)
        kept, merged = merge_novel_junction_variants([novel, ref1, ref2])
        assert kept == [ref1, ref2, novel]
        assert merged == []
        assert ref1.junction_read_count == 3

    def test_not_merged_across_names(self):
        first = mock_fusion(name='G1--G2', pos1=100, splice_type=NON_REF)
        second = mock_fusion(name='G3--G4', pos1=100, splice_type=NON_REF)
        kept, merged = merge_novel_junction_variants([first, second])
        assert kept == [first, second]
        assert merged == []

    def test_chain_not_merged_transitively(self):
        center = mock_fusion(junction=5, pos1=100, pos2=500, splice_type=NON_REF)
        near = mock_fusion(junction=2, pos1=104, pos2=500, splice_type=NON_REF)
        far = mock_fusion(junction=1, pos1=108, pos2=500, splice_type=NON_REF)
        kept, merged = merge_novel_junction_variants([far, near, center], aggregate_dist=5)
        assert kept == [center, far]
        assert merged == [near]
        assert far.junction_read_count == 1

    def test_outside_distance_kept_separately(self):
        first = mock_fusion(junction=4, pos1=100, pos2=500, splice_type=NON_REF)
        second = mock_fusion(junction=3, pos1=100, pos2=510, splice_type=NON_REF)
        kept, merged = merge_novel_junction_variants([first, second], aggregate_dist=5)
        assert kept == [first, second]
        assert merged == []

    def test_empty(self):
        assert merge_novel_junction_variants([]) == ([], [])
