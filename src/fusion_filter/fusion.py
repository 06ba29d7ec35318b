import re
from typing import Dict, Iterable, List, Optional

from .constants import (
    COLUMNS,
    JUNCTION_READ_WEIGHT,
    LDAS_NO,
    LDAS_YES,
    NULL_READ_NAME,
    SPLICE_TYPE,
    STRAND,
)
from .error import InvalidFusionRecord


def parse_read_names(string: Optional[str]) -> List[str]:
    """
    split a comma delimited list of read names, dropping duplicates but keeping the input order

    Example:
        >>> parse_read_names('r1,r2,r1')
        ['r1', 'r2']
        >>> parse_read_names('.')
        []
    """
    if not string or string == NULL_READ_NAME:
        return []
    return list(dict.fromkeys([name for name in string.split(',') if name]))


def format_read_names(names: Iterable[str]) -> str:
    names = list(names)
    if not names:
        return NULL_READ_NAME
    return ','.join(names)


class Breakpoint:
    """
    class for storing information about a fusion breakpoint on one of the partner genes
    coordinates are given as 1-indexed
    """

    chr: str
    pos: int
    strand: str

    @property
    def key(self):
        return (self.chr, self.pos, self.strand)

    def __init__(self, chr: str, pos: int, strand: str = STRAND.NS):
        """
        Args:
            chr: the chromosome
            pos: the genomic position of the breakpoint
            strand (STRAND): the strand

        Examples:
            >>> Breakpoint('chr1', 100, '+')
            >>> Breakpoint('chr1', 100)
        """
        self.chr = chr
        self.pos = int(pos)
        self.strand = STRAND.enforce(strand)

    @classmethod
    def parse(cls, string: str) -> 'Breakpoint':
        """
        Example:
            >>> Breakpoint.parse('chr7:55241736:+')
            Breakpoint(chr7:55241736:+)
        """
        try:
            chr, pos, strand = string.rsplit(':', 2)
            return cls(chr, int(pos), strand)
        except (ValueError, KeyError, AttributeError):
            raise InvalidFusionRecord(
                'could not parse the breakpoint, expected chr:pos:strand', string
            )

    def __str__(self):
        return '{}:{}:{}'.format(self.chr, self.pos, self.strand)

    def __repr__(self):
        return 'Breakpoint({})'.format(str(self))

    def __eq__(self, other):
        if not hasattr(other, 'key'):
            return False
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)


class FusionRecord:
    """
    a single fusion candidate and the reads supporting it

    The junction and spanning read counts are the authoritative evidence levels. Once two
    records have been merged the counts are recalculated from the read names and a read which
    is both a junction read and a spanning fragment is only counted as a junction read
    """

    name: str
    break1: Breakpoint
    break2: Breakpoint
    splice_type: str
    junction_read_count: int
    spanning_frag_count: int
    junction_reads: List[str]
    spanning_frags: List[str]
    large_anchor_support: str
    gene1: Optional[str]
    gene2: Optional[str]
    filter_comment: Optional[str]
    line_no: Optional[int]
    data: Dict[str, str]

    def __init__(
        self,
        name: str,
        break1: Breakpoint,
        break2: Breakpoint,
        splice_type: str = SPLICE_TYPE.REF,
        junction_reads: Optional[List[str]] = None,
        spanning_frags: Optional[List[str]] = None,
        junction_read_count: Optional[int] = None,
        spanning_frag_count: Optional[int] = None,
        large_anchor_support: str = LDAS_NO,
        gene1: Optional[str] = None,
        gene2: Optional[str] = None,
        line_no: Optional[int] = None,
        **kwargs
    ):
        """
        Args:
            name: the fusion name (conventionally geneA--geneB)
            break1: the left (5') breakpoint
            break2: the right (3') breakpoint
            splice_type (SPLICE_TYPE): the splice type of the breakpoints
            junction_reads: names of the reads spanning the fusion junction
            spanning_frags: names of the fragments whose mates flank the fusion junction
            junction_read_count: number of junction reads, defaults to the number of junction read names
            spanning_frag_count: number of spanning fragments, defaults to the number of spanning fragment names
            large_anchor_support: the large anchor support flag (ex. YES_LDAS)
            line_no: the line of the input file this record was read from
            data: any other (passthrough) columns associated with this fusion

        Example:
            >>> FusionRecord('G1--G2', Breakpoint('chr1', 100, '+'), Breakpoint('chr1', 500, '+'), junction_reads=['r1'])
        """
        self.name = name
        self.break1 = break1
        self.break2 = break2
        self.splice_type = SPLICE_TYPE.enforce(splice_type)
        self.junction_reads = list(junction_reads or [])
        self.spanning_frags = list(spanning_frags or [])
        self.junction_read_count = (
            len(self.junction_reads) if junction_read_count is None else junction_read_count
        )
        self.spanning_frag_count = (
            len(self.spanning_frags) if spanning_frag_count is None else spanning_frag_count
        )
        if self.junction_read_count < 0 or self.spanning_frag_count < 0:
            raise InvalidFusionRecord(
                'read counts cannot be negative',
                name,
                self.junction_read_count,
                self.spanning_frag_count,
            )
        self.large_anchor_support = large_anchor_support
        self.gene1 = gene1
        self.gene2 = gene2
        self.line_no = line_no
        self.filter_comment = None
        self.data = kwargs

    @property
    def score(self) -> int:
        return JUNCTION_READ_WEIGHT * self.junction_read_count + self.spanning_frag_count

    @property
    def total_support(self) -> int:
        return self.junction_read_count + self.spanning_frag_count

    @property
    def is_novel_splice(self) -> bool:
        return self.splice_type == SPLICE_TYPE.NON_REF

    @property
    def has_long_double_anchor_support(self) -> bool:
        return bool(re.match(r'^yes', str(self.large_anchor_support), re.IGNORECASE))

    def merge(self, other: 'FusionRecord') -> None:
        """
        absorb the evidence of another call of the same fusion into this one. The breakpoints
        and passthrough data of this record are kept
        """
        junction_reads = dict.fromkeys(self.junction_reads + other.junction_reads)
        spanning_frags = dict.fromkeys(
            [
                name
                for name in self.spanning_frags + other.spanning_frags
                if name not in junction_reads
            ]
        )
        self.junction_reads = list(junction_reads)
        self.spanning_frags = list(spanning_frags)
        self.junction_read_count = len(self.junction_reads)
        self.spanning_frag_count = len(self.spanning_frags)

        if other.has_long_double_anchor_support and not self.has_long_double_anchor_support:
            self.large_anchor_support = LDAS_YES

    def flatten(self, name_prefix: str = '') -> Dict[str, str]:
        """
        returns the key-value representation of the fusion which can be written directly as a tab row
        """
        row = {}
        row.update(self.data)
        temp = {
            COLUMNS.fusion_name: name_prefix + self.name,
            COLUMNS.junction_read_count: self.junction_read_count,
            COLUMNS.spanning_frag_count: self.spanning_frag_count,
            COLUMNS.splice_type: self.splice_type,
            COLUMNS.gene1: self.gene1,
            COLUMNS.break1: self.break1,
            COLUMNS.gene2: self.gene2,
            COLUMNS.break2: self.break2,
            COLUMNS.junction_reads: format_read_names(self.junction_reads),
            COLUMNS.spanning_frags: format_read_names(self.spanning_frags),
            COLUMNS.large_anchor_support: self.large_anchor_support,
        }
        for col in temp:
            temp[col] = '' if temp[col] is None else str(temp[col])
        row.update(temp)
        return row

    def __repr__(self):
        return 'FusionRecord({}, {}, {}, J={}, S={})'.format(
            self.name,
            self.break1,
            self.break2,
            self.junction_read_count,
            self.spanning_frag_count,
        )
