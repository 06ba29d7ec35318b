import pytest
from fusion_filter.constants import LDAS_YES, SPLICE_TYPE
from fusion_filter.filter.filter import (
    check_support,
    filter_by_support,
    filter_minor_isoforms,
)

from ..mock import mock_fusion


class TestCheckSupport:
    def test_sufficient_support(self):
        assert check_support(mock_fusion(junction=1, spanning=1)) is None

    def test_insufficient_total_support(self):
        reason = check_support(mock_fusion(junction=0, spanning=1))
        assert reason.startswith('insufficient total support')

    def test_total_support_checked_first(self):
        fusion = mock_fusion(junction=0, spanning=1, splice_type=SPLICE_TYPE.NON_REF)
        reason = check_support(fusion, require_long_double_anchor_support=True)
        assert reason.startswith('insufficient total support')

    def test_insufficient_novel_junction_support(self):
        fusion = mock_fusion(junction=2, spanning=5, splice_type=SPLICE_TYPE.NON_REF)
        reason = check_support(fusion, min_novel_junction_support=3)
        assert reason.startswith('insufficient novel-junction support')
        assert check_support(fusion, min_novel_junction_support=2) is None

    def test_novel_junction_threshold_ignores_reference_splice(self):
        assert check_support(mock_fusion(junction=2, spanning=5), min_novel_junction_support=3) is None

    def test_novel_junction_checked_before_junction_reads(self):
        fusion = mock_fusion(junction=2, spanning=5, splice_type=SPLICE_TYPE.NON_REF)
        reason = check_support(fusion, min_junction_reads=5, min_novel_junction_support=3)
        assert reason.startswith('insufficient novel-junction support')

    def test_insufficient_junction_reads(self):
        reason = check_support(mock_fusion(junction=0, spanning=3))
        assert reason.startswith('insufficient junction-read support')

    def test_no_spanning_and_no_anchor_support(self):
        fusion = mock_fusion(junction=2, spanning=0)
        assert check_support(fusion) is None
        reason = check_support(fusion, require_long_double_anchor_support=True)
        assert reason.startswith('no spanning support and no anchor support')

    def test_anchor_support_not_needed_with_spanning(self):
        fusion = mock_fusion(junction=2, spanning=1)
        assert check_support(fusion, require_long_double_anchor_support=True) is None

    def test_anchor_support_rescues(self):
        fusion = mock_fusion(junction=2, spanning=0, large_anchor_support=LDAS_YES)
        assert check_support(fusion, require_long_double_anchor_support=True) is None


class TestFilterBySupport:
    def test_split_keeps_order(self):
        fusions = [
            mock_fusion(junction=2, spanning=0),
            mock_fusion(junction=0, spanning=1),
            mock_fusion(junction=5, spanning=5),
            mock_fusion(junction=0, spanning=4),
        ]
        passed, failed = filter_by_support(fusions)
        assert passed == [fusions[0], fusions[2]]
        assert failed == [fusions[1], fusions[3]]
        assert all([f.filter_comment for f in failed])
        assert all([f.filter_comment is None for f in passed])


class TestFilterMinorIsoforms:
    def test_minor_isoform_removed(self):
        dominant = mock_fusion(junction=20, spanning=5, pos1=100)
        minor = mock_fusion(junction=1, spanning=8, pos1=200)
        passed, failed = filter_minor_isoforms([minor, dominant], min_alt_pct_junction=10)
        assert passed == [dominant]
        assert failed == [minor]
        assert minor.filter_comment.startswith('minor isoform')
        assert '5.00%' in minor.filter_comment

    def test_alternative_isoform_retained(self):
        dominant = mock_fusion(junction=20, spanning=5, pos1=100)
        alt = mock_fusion(junction=3, spanning=0, pos1=200)
        passed, failed = filter_minor_isoforms([alt, dominant], min_alt_pct_junction=10)
        assert passed == [dominant, alt]
        assert failed == []

    def test_threshold_is_exclusive(self):
        dominant = mock_fusion(junction=20, pos1=100)
        alt = mock_fusion(junction=2, pos1=200)
        passed, failed = filter_minor_isoforms([dominant, alt], min_alt_pct_junction=10)
        assert failed == []

    def test_dominant_without_junction_reads(self):
        dominant = mock_fusion(junction=0, spanning=6, pos1=100)
        other = mock_fusion(junction=0, spanning=2, pos1=200)
        passed, failed = filter_minor_isoforms([other, dominant])
        assert passed == [dominant, other]
        assert failed == []

    def test_ranked_by_spanning_when_junction_tied(self):
        first = mock_fusion(junction=4, spanning=1, pos1=100)
        second = mock_fusion(junction=4, spanning=3, pos1=200)
        passed, _ = filter_minor_isoforms([first, second])
        assert passed == [second, first]

    def test_names_ranked_independently(self):
        big = mock_fusion(name='G1--G2', junction=100)
        small = mock_fusion(name='G3--G4', junction=1)
        passed, failed = filter_minor_isoforms([small, big])
        assert passed == [big, small]
        assert failed == []

    @pytest.mark.parametrize('threshold,rejected', [(0, False), (50, True)])
    def test_threshold(self, threshold, rejected):
        dominant = mock_fusion(junction=10, pos1=100)
        alt = mock_fusion(junction=4, pos1=200)
        _, failed = filter_minor_isoforms([dominant, alt], min_alt_pct_junction=threshold)
        assert (failed == [alt]) == rejected
