"""
module responsible for small utility functions and constants used throughout the fusion_filter package
"""
from mavis_config.constants import MavisNamespace

PROGNAME: str = 'fusion-filter'


class SUBCOMMAND(MavisNamespace):
    """
    holds the names of the command line subcommands
    """

    FILTER: str = 'filter'
    ABRIDGE: str = 'abridge'


class SPLICE_TYPE(MavisNamespace):
    """
    holds controlled vocabulary for allowed splice type classification values

    Attributes:
        REF: both breakpoints fall on reference exon boundaries
        NON_REF: at least one breakpoint is a novel (non-reference) splice site
    """

    REF: str = 'ONLY_REF_SPLICE'
    NON_REF: str = 'INCL_NON_REF_SPLICE'


class STRAND(MavisNamespace):
    """
    holds controlled vocabulary for allowed strand values

    Attributes:
        POS: the positive/forward strand
        NEG: the negative/reverse strand
        NS: strand is not specified
    """

    POS: str = '+'
    NEG: str = '-'
    NS: str = '?'


class NOTE(MavisNamespace):
    """
    values of the note column of the audit file which do not carry a filter reason
    """

    RETAINED: str = 'Retained'
    MERGED: str = 'Merged'


# content related to tabbed files for input/output
# ensure that we don't have to change ALL the code when we update column names
class COLUMNS(MavisNamespace):
    """
    Column names for i/o files used throughout the pipeline
    """

    fusion_name: str = '#FusionName'
    junction_read_count: str = 'JunctionReadCount'
    spanning_frag_count: str = 'SpanningFragCount'
    splice_type: str = 'SpliceType'
    gene1: str = 'LeftGene'
    break1: str = 'LeftBreakpoint'
    gene2: str = 'RightGene'
    break2: str = 'RightBreakpoint'
    junction_reads: str = 'JunctionReads'
    spanning_frags: str = 'SpanningFrags'
    large_anchor_support: str = 'LargeAnchorSupport'
    note: str = 'Note'


REQUIRED_COLUMNS = [
    COLUMNS.fusion_name,
    COLUMNS.junction_read_count,
    COLUMNS.spanning_frag_count,
    COLUMNS.splice_type,
    COLUMNS.gene1,
    COLUMNS.break1,
    COLUMNS.gene2,
    COLUMNS.break2,
    COLUMNS.junction_reads,
    COLUMNS.spanning_frags,
    COLUMNS.large_anchor_support,
]
"""the columns every input row must define, in the order they are written for new files"""

ABRIDGED_EXCLUDE_COLUMNS = [COLUMNS.junction_reads, COLUMNS.spanning_frags]
"""columns dropped from the abridged reports"""

COMMENT_PREFIX: str = '#'
"""prefixed to the fusion name of rows that should be skipped when the file is re-read"""

NULL_READ_NAME: str = '.'
"""placeholder for an empty list of read names"""

LDAS_YES: str = 'YES_LDAS'
LDAS_NO: str = 'NO_LDAS'

JUNCTION_READ_WEIGHT: int = 4
"""weight of a junction read relative to a spanning fragment when scoring a fusion"""
